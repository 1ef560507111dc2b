"""
Production FastAPI Application

Run with: uvicorn bus_reservation.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from bus_reservation.platform.app_factory import create_app
from bus_reservation.platform.config.di import container, setup
from bus_reservation.platform.config.wire_modules import WIRE_MODULES
from bus_reservation.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Bus Reservation] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Bus Reservation] Dependency injection wired')

    setup()
    Logger.base.info('🗂️  [Bus Reservation] In-memory ledger ready')

    yield

    Logger.base.info('🛑 [Bus Reservation] Shutting down...')
    container.unwire()
    Logger.base.info('✅ [Bus Reservation] Shutdown complete')


app = create_app(lifespan=lifespan)
