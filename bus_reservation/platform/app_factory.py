"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bus_reservation.platform.config.core_setting import settings
from bus_reservation.platform.constant.route_constant import BUS_BASE, HEALTH, TICKET_BASE
from bus_reservation.platform.exception.exception_handlers import register_exception_handlers
from bus_reservation.service.reservation.driving_adapter.http_controller.bus_controller import (
    router as bus_router,
)
from bus_reservation.service.reservation.driving_adapter.http_controller.ticket_controller import (
    router as ticket_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'In-memory bus seat reservation ledger',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(bus_router, prefix=BUS_BASE, tags=['bus'])
    app.include_router(ticket_router, prefix=TICKET_BASE, tags=['ticket'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}
