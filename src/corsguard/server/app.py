"""
This module configures and initializes the FastAPI application for the corsguard server.

The application is a thin host for the CORS interceptor: it serves a root
endpoint, a health check and a view of the active policy, and mounts the
request timing and CORS middleware. The CORS middleware is registered last so
it runs outermost and sees every header set by routes and inner middleware.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..banner import print_server_banner
from ..config import CorsguardConfig, get_config
from ..my_logging import setup_debug_logging
from .middleware.cors import add_cors_middleware
from .middleware.logging import add_logging_middleware
from .routes import health, policy


def create_app(config: CorsguardConfig | None = None) -> FastAPI:
    """
    Builds the corsguard FastAPI application.

    Args:
        config: The configuration to use. Defaults to the global configuration.

    Returns:
        The configured `FastAPI` application.
    """
    if config is None:
        config = get_config()

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
        """Manage application lifecycle."""
        print_server_banner(config.server_host, config.server_port)
        setup_debug_logging()
        yield

    app = FastAPI(
        title="corsguard Server",
        description="HTTP host for the corsguard Cross-Origin Resource Sharing interceptor",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware; CORS goes last so it wraps everything else
    add_logging_middleware(app)
    app.state.cors_interceptor = add_cors_middleware(app, config.policy())

    # Include routers
    app.include_router(health.router, prefix="/api/v1")
    app.include_router(policy.router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic server information."""
        return {
            "name": "corsguard Server",
            "version": __version__,
            "description": "Cross-Origin Resource Sharing interceptor",
            "docs_url": "/docs",
            "health_url": "/api/v1/health",
        }

    return app
