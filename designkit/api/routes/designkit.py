"""
DesignKit API.

Serves the last-synced selection state, the DesignConfig assembled from
it, single-format exports, and a server-sent event stream of state
changes.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response, StreamingResponse
from pydantic import ValidationError

from designkit.api.deps import get_catalog, get_event_bus, get_registry, get_snapshot_store
from designkit.catalog import Catalog
from designkit.components.assemble import assemble
from designkit.components.export import ExporterRegistry, UnknownFormatError
from designkit.domain.entities import DesignConfig, DesignState
from designkit.ports.state_store import SnapshotStorePort
from designkit.services.events import STATE_UPDATED, EventBus

router = APIRouter()

NO_STATE = "No state available"
INVALID_STATE = "Invalid state: requires selections, colorPicks, typeScale"
HEARTBEAT_SECONDS = 30.0


# --- Helper Functions ---


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def build_config(state: DesignState, catalog: Catalog) -> DesignConfig:
    return assemble(state.selections, state.color_picks, state.type_scale, catalog).config


def _is_valid_state_body(body: Any) -> bool:
    return (
        isinstance(body, dict)
        and isinstance(body.get("selections"), dict)
        and isinstance(body.get("colorPicks"), dict)
        and isinstance(body.get("typeScale"), str)
        and bool(body["typeScale"])
    )


def _sse(event: str, data: dict[str, Any]) -> str:
    return f"event: {event}\ndata: {json.dumps(data)}\n\n"


async def event_stream(bus: EventBus, heartbeat_s: float = HEARTBEAT_SECONDS) -> AsyncIterator[str]:
    """
    Server-sent events for bus activity.

    Starts with a `connected` event, then one event per emit, with a
    comment heartbeat whenever the bus is idle for heartbeat_s.
    """
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[tuple[str, int]] = asyncio.Queue()

    def forward(event: str, seq: int) -> None:
        loop.call_soon_threadsafe(queue.put_nowait, (event, seq))

    unsubscribe = bus.subscribe(forward)
    try:
        yield "event: connected\ndata: {}\n\n"
        while True:
            try:
                event, seq = await asyncio.wait_for(queue.get(), timeout=heartbeat_s)
            except TimeoutError:
                yield ": heartbeat\n\n"
                continue
            yield _sse(event, {"event": event, "seq": seq})
    finally:
        unsubscribe()


# --- Routes ---


@router.get("/config")
def get_config(
    store: SnapshotStorePort = Depends(get_snapshot_store),
    catalog: Catalog = Depends(get_catalog),
) -> Response:
    """Current DesignConfig assembled from the last-synced state."""
    state = store.get()
    if state is None:
        return error_response(NO_STATE, 404)
    return JSONResponse(build_config(state, catalog).to_wire())


@router.get("/state")
def get_state(store: SnapshotStorePort = Depends(get_snapshot_store)) -> Response:
    """Raw selections, color picks and type scale."""
    state = store.get()
    if state is None:
        return error_response(NO_STATE, 404)
    return JSONResponse(state.to_wire())


@router.post("/state")
async def post_state(
    request: Request,
    store: SnapshotStorePort = Depends(get_snapshot_store),
    bus: EventBus = Depends(get_event_bus),
) -> Response:
    """Replace the synced state and notify event subscribers."""
    try:
        body = await request.json()
    except (ValueError, RecursionError):
        return error_response(INVALID_STATE, 400)

    if not _is_valid_state_body(body):
        return error_response(INVALID_STATE, 400)

    try:
        state = DesignState.model_validate(body)
    except ValidationError:
        return error_response(INVALID_STATE, 400)

    store.set(state)
    bus.emit(STATE_UPDATED)
    return JSONResponse({"ok": True})


@router.get("/export/{format_id}")
def get_export(
    format_id: str,
    store: SnapshotStorePort = Depends(get_snapshot_store),
    catalog: Catalog = Depends(get_catalog),
    registry: ExporterRegistry = Depends(get_registry),
) -> Response:
    """One export format rendered from the current state."""
    try:
        exporter = registry.get(format_id)
    except UnknownFormatError as e:
        return error_response(str(e), 400)

    state = store.get()
    if state is None:
        return error_response(NO_STATE, 404)

    content = exporter.render(build_config(state, catalog))
    return Response(content=content, media_type=exporter.media_type)


@router.get("/events")
async def get_events(bus: EventBus = Depends(get_event_bus)) -> StreamingResponse:
    """Server-sent event stream of state changes."""
    return StreamingResponse(
        event_stream(bus),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache, no-transform", "Connection": "keep-alive"},
    )
