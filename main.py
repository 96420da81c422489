"""FastAPI application entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

import barbershop.models  # noqa: F401
from barbershop.core.config import Settings, get_settings
from barbershop.core.database import create_engine_from_settings, create_session_factory
from barbershop.core.exceptions import register_exception_handlers
from barbershop.core.logging_config import configure_logging
from barbershop.modules.appointments.router import router as appointments_router
from barbershop.modules.assignments.router import router as assignments_router
from barbershop.modules.auth.router import router as auth_router
from barbershop.modules.catalog.router import router as catalog_router
from barbershop.modules.payments.router import router as payments_router
from barbershop.modules.products.router import router as products_router
from barbershop.modules.staff.router import router as staff_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    engine = create_engine_from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s", settings.app_name)
        yield
        await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    register_exception_handlers(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(auth_router)
    app.include_router(staff_router)
    app.include_router(catalog_router)
    app.include_router(assignments_router)
    app.include_router(appointments_router)
    app.include_router(payments_router)
    app.include_router(products_router)

    return app


app = create_app()
