"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger

# Registers every ORM model on Base.metadata before create_tables()
import src.service.venue_reservation.driven_adapter.model  # noqa: F401


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Venue Reservation] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Venue Reservation] Dependency injection wired')

    database = container.database()
    await database.create_tables()
    Logger.base.info('✅ [Venue Reservation] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Venue Reservation] Shutting down...')
    await database.dispose()
    container.unwire()
    Logger.base.info('👋 [Venue Reservation] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='Venue Reservation Service - chair and space reservations, conflicts and check-in',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
