"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from devconnect.config import Settings
from devconnect.interface.api.routes import auth, health, posts, profile, users
from devconnect.interface.api.validation import validation_exception_handler
from devconnect.util.di.container import create_container, setup_di
from devconnect.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this (start_app.py does it
    in production, tests/conftest.py in tests).

    Args:
        container: DI container to use; the production container by default
    """
    settings = Settings()

    # Outbound GitHub calls
    instrument_httpx()

    app_instance = FastAPI(
        title="DevConnect API",
        description="Backend API for DevConnect - developer profiles and a community feed",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Auth-Token",
        ],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(profile.router)
    app_instance.include_router(posts.router)

    return app_instance


# Note: Logfire must be configured before this module is imported
app = create_app()
