"""
Application configuration.

Values come from an optional YAML file, then environment overrides, then
pydantic validation. Any failure surfaces as ValueError.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

CONFIG_ENV = "DESIGNKIT_CONFIG"

ENV_OVERRIDES = {
    "DESIGNKIT_STATE_DIR": "state_dir",
    "DESIGNKIT_CATALOG": "catalog_path",
    "DESIGNKIT_SERVER_URL": "server_url",
    "DESIGNKIT_LOG_LEVEL": "log_level",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseModel):
    state_dir: Path = Field(default_factory=lambda: Path.home() / ".designkit")
    # None means the packaged seed catalog
    catalog_path: Path | None = None
    server_url: str = "http://localhost:3000"
    sync_debounce_ms: int = Field(default=500, ge=0)
    history_limit: int = Field(default=50, ge=1)
    bridge_timeout_s: float = Field(default=5.0, gt=0)
    log_level: str = "INFO"

    @field_validator("state_dir", "catalog_path")
    @classmethod
    def expand_user(cls, v: Path | None) -> Path | None:
        return v.expanduser() if v is not None else None

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_config(path: Path | None = None, environ: dict[str, str] | None = None) -> AppConfig:
    """
    Load configuration.
    Raises FileNotFoundError if an explicit path is missing.
    Raises ValueError if YAML or schema invalid.
    """
    env = os.environ if environ is None else environ
    data: dict = {}

    if path is None and env.get(CONFIG_ENV):
        path = Path(env[CONFIG_ENV])

    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found at: {path}")
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in config file: {e}") from e
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError("Config file must contain a mapping")
        data.update(loaded or {})

    for var, field in ENV_OVERRIDES.items():
        if env.get(var):
            data[field] = env[var]

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e
