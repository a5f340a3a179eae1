"""
FastAPI application factory.

This file:
1. Configures logging
2. Creates the FastAPI app
3. Registers all routers (health, portfolio, fcfs)

There is nothing to connect to on startup (no database, no cache), so the
lifespan only logs the limits the simulator runs with.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from api.routers import health, portfolio, simulator

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Runs on startup (before yield) and shutdown (after yield)."""
    logger.info(
        f"Portfolio API ready, simulator limits: "
        f"max_time_unit={settings.MAX_TIME_UNIT}, max_processes={settings.MAX_PROCESSES}"
    )
    yield
    logger.info("Portfolio API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title=f"{settings.SITE_OWNER} Portfolio",
        description="Portfolio content and a First-Come-First-Served CPU scheduling simulator",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(portfolio.router)
    app.include_router(simulator.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
