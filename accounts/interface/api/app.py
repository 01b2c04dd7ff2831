"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from accounts.config import Settings
from accounts.interface.api.errors import configure_exception_handlers
from accounts.interface.api.routes import admin, auth, groups, health, profile
from accounts.util.di.container import create_container, setup_di
from accounts.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container; tests pass one built from mock providers.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Accounts API",
        description="User accounts: sign up, sign in, profile and administration",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    configure_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(profile.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(groups.router)

    return app_instance
