"""FastAPI application factory.

``create_app`` builds a fully configured ``FastAPI`` instance with:

* CORS middleware
* Request-logging / exception-handling middleware
* FNOL intake routes
* A shared :class:`FNOLProcessor` built from the ``rules`` config section
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from fnol_agent import __version__
from fnol_agent.api.middleware import ExceptionHandlerMiddleware, RequestLoggingMiddleware
from fnol_agent.api.routes.fnol import router as fnol_router
from fnol_agent.core.processing import FNOLProcessor
from fnol_agent.logging.setup import setup_logging

if TYPE_CHECKING:
    from omegaconf import DictConfig


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    rules = app.state.processor.rules
    logger.info(
        "FNOL intake ready (fast-track < {fast}, fraud keywords={kw})",
        fast=rules.fast_track_threshold,
        kw=", ".join(rules.fraud_keywords),
    )
    yield
    logger.info("Application shutting down")


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def create_app(cfg: DictConfig) -> FastAPI:
    """Build and return a fully configured :class:`FastAPI` application.

    Parameters
    ----------
    cfg:
        The merged Hydra configuration.

    Returns
    -------
    FastAPI
        Ready-to-run application instance.
    """
    # ── Logging ──────────────────────────────────────────────────────────
    setup_logging(cfg.logging)

    # ── App ──────────────────────────────────────────────────────────────
    app = FastAPI(
        title="FNOL Intake Agent",
        description="First Notice of Loss extraction, completeness checking and routing",
        version=__version__,
        lifespan=_lifespan,
    )
    app.state.cfg = cfg

    # ── Processor ────────────────────────────────────────────────────────
    app.state.processor = FNOLProcessor.from_config(cfg)

    # ── CORS ─────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.server.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Custom middleware (outermost = first to run) ─────────────────────
    app.add_middleware(ExceptionHandlerMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # ── Routes ───────────────────────────────────────────────────────────
    app.include_router(fnol_router, prefix="/api/v1")

    return app
