"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from authn.config import Settings
from authn.interface.api.routes import federated_authn, health
from authn.util.di.container import create_container, setup_di
from authn.util.observability import instrument_fastapi, instrument_httpx


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production start_app.py handles this.

    Args:
        settings: Settings for app-level wiring (CORS); loaded from env if omitted
        container: DI container; the production container if omitted
    """
    settings = settings or Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Federated Authn API",
        description="Sign-in with third-party identity providers",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Custom-domain platforms call from their own origins; they are not
    # listed here and must go through their reverse proxy.
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(federated_authn.router)

    return app_instance
