# oche/server/__init__.py
"""Oche Ladder Server - darts Elo leaderboard over HTTP."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from oche.ladder import EloConfig, LadderService, StateStore
from oche.ladder.errors import LadderError

from .config import Settings, settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("oche.server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    app.state.started_at = time.time()
    ladder: LadderService = app.state.ladder
    logger.info(f"Oche Ladder Server starting with {len(ladder.state.players)} players from {ladder.store.path}")
    yield
    logger.info("Oche Ladder Server shutting down...")


async def ladder_error_handler(request: Request, exc: LadderError) -> JSONResponse:
    """Report domain errors as JSON with the message shown to the user."""
    return JSONResponse(status_code=exc.status_code, content=exc.as_dict())


def create_app(
    *,
    state_path: Path | None = None,
    config: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        state_path: Optional path to the ladder JSON file (overrides config).
        config: Optional settings; the environment-derived settings otherwise.
    """
    from .models import HealthResponse
    from .routes import admin, pages
    from .routes import ladder as ladder_routes

    config = config or settings
    cfg = EloConfig(k_factor=config.K_FACTOR, rating0=config.DEFAULT_RATING)
    store = StateStore(state_path or config.STATE_PATH, cfg=cfg)

    app = FastAPI(lifespan=lifespan, title="Oche Ladder Server")
    app.state.ladder = LadderService(store, reset_passphrase=config.RESET_PASSPHRASE, cfg=cfg)
    app.state.started_at = time.time()

    app.add_exception_handler(LadderError, ladder_error_handler)

    app.include_router(ladder_routes.router)
    app.include_router(admin.router)
    app.include_router(pages.router)

    @app.get("/health")
    def health_check(request: Request):
        """Health check endpoint."""
        service: LadderService = request.app.state.ladder
        return HealthResponse(
            status="ok",
            players=len(service.state.players),
            uptime_s=time.time() - request.app.state.started_at,
        )

    return app


app = create_app()
