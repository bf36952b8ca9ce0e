"""
FastAPI Application Entry Point.

This is the main entry point for the Tool Context API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tool_context import __version__
from tool_context.infrastructure.config.logging_config import configure_logging
from tool_context.infrastructure.config.settings import get_settings
from tool_context.presentation.api.routers import tools_router, servers_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    settings = get_settings()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    logger.info("Debug mode: %s", settings.debug)

    yield

    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Describe Python functions as MCP tools and inspect MCP servers",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.include_router(tools_router)
    app.include_router(servers_router)

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "tool_context.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
