import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reservations_api.api.core.exceptions.base import register_exception_handlers
from reservations_api.api.core.middleware.auth import auth_middleware
from reservations_api.api.core.middleware.logging import logging_middleware
from reservations_api.api.core.middleware.security import (
    PayloadSizeMiddleware,
    SecurityHeadersMiddleware,
)
from reservations_api.api.router import api_router
from reservations_api.database.connection import AsyncSessionLocal, async_engine
from reservations_api.database.models import Base
from reservations_api.modules.organization.roles import RoleService
from reservations_api.utils.logger import setup_logging
from reservations_api.utils.settings.app import AppSettings

app_settings = AppSettings()
is_production = app_settings.ENVIRONMENT.upper() == "PROD"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger = setup_logging(is_production)
    logger.info("Starting Reservations API...")
    app_settings.validate_prod()

    app.state.session_factory = AsyncSessionLocal
    logger.info("Database session factory added to app state")

    if app_settings.AUTO_CREATE_TABLES:
        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with AsyncSessionLocal() as session:
            await RoleService(session).ensure_default_roles()
        logger.info("Database tables created")

    yield

    logger.info("Shutting down Reservations API...")
    await async_engine.dispose()


app = FastAPI(
    title="Reservations API",
    description="Multi-tenant calendar and reservation booking",
    version=app_settings.API_VERSION,
    lifespan=lifespan,
    docs_url=None if is_production else "/docs",
    redoc_url=None if is_production else "/redoc",
    openapi_url=None if is_production else "/openapi.json",
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware, is_production=is_production)
app.add_middleware(
    PayloadSizeMiddleware, max_request_size=app_settings.MAX_REQUEST_SIZE
)
app.middleware("http")(auth_middleware)
app.middleware("http")(logging_middleware)

app.include_router(api_router)


def run_dev_server():
    """Run development server with auto-reload."""
    uvicorn.run(
        "reservations_api.main:app",
        host="0.0.0.0",
        port=8010,
        reload=True,
        access_log=False,
    )


def run_prod_server():
    """Run production server."""
    uvicorn.run(
        "reservations_api.main:app",
        host="0.0.0.0",
        port=8010,
        reload=False,
        access_log=False,
    )
