from functools import lru_cache

from fastapi import Depends

from designkit.adapters.snapshot_store import FileSnapshotStore
from designkit.app_shell.config import AppConfig, load_config
from designkit.catalog import Catalog, load_checked_catalog
from designkit.components.export import ExporterRegistry, default_registry
from designkit.ports.state_store import SnapshotStorePort
from designkit.services.events import EventBus


# --- Settings ---
@lru_cache
def get_settings() -> AppConfig:
    return load_config()


# --- Catalog ---
@lru_cache
def get_catalog() -> Catalog:
    return load_checked_catalog(get_settings().catalog_path)


# --- Stores ---
def get_snapshot_store(settings: AppConfig = Depends(get_settings)) -> SnapshotStorePort:
    return FileSnapshotStore(settings.state_dir)


# --- Events ---
@lru_cache
def get_event_bus() -> EventBus:
    return EventBus()


# --- Exporters ---
def get_registry() -> ExporterRegistry:
    return default_registry
