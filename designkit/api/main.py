import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from designkit.api.deps import get_catalog, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Load and check the catalog on startup (fail-fast)
    try:
        settings = get_settings()
        catalog = get_catalog()
        logger.info(
            "Catalog ready (%d categories), state dir %s",
            len(catalog.categories()),
            settings.state_dir,
        )
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Startup failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="DesignKit API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from designkit.api.routes import designkit  # noqa: E402

app.include_router(designkit.router, prefix="/api/designkit", tags=["DesignKit"])


# CORS (Allow local tools)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "designkit"}
