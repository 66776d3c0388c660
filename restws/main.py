"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, routers. No resolution logic
here; see restws.application.services and restws.core.lifespan.

Settings are loaded inside create_app() so that tests can set env (and
optionally clear get_settings cache) before calling create_app().
"""

from fastapi import FastAPI

from restws.api.v1 import api_router
from restws.application.services.rest_service import RestService
from restws.core.config import get_settings
from restws.core.exception_handlers import register_exception_handlers
from restws.core.lifespan import create_lifespan


def create_app(rest_service: RestService | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        rest_service: Pre-populated service; when None, the lifespan builds
            an empty one from settings.
    """
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.rest_service = rest_service

    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()
