"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .api import alerts_router, health_router
from .bootstrap import ServiceContainer, bootstrap_services, shutdown_services
from .logging_config import configure_logging
from .settings import get_settings


def create_app(container: ServiceContainer | None = None) -> FastAPI:
    settings = container.settings if container else get_settings()
    configure_logging(settings.log_level)
    services = container or ServiceContainer(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # pragma: no cover - invoked by FastAPI
        await bootstrap_services(services)
        yield
        await shutdown_services(services)

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.include_router(health_router)
    app.include_router(alerts_router)
    app.state.container = services
    return app
