# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Auto Rating Engine - Main Application Module."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from beartype import beartype
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .api.dependencies import get_rating_engine
from .api.v1 import router as v1_router
from .core.config import get_settings
from .core.exceptions import RatingError
from .core.logging_utils import configure_logging, get_logger
from .schemas.premium import APIInfo

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle - startup and shutdown."""
    settings = get_settings()
    logger.info("Starting %s in %s mode", settings.app_name, settings.api_env)

    engine = get_rating_engine()
    logger.info(
        "Rating engine ready: %d rules, %d rates",
        len(engine.rules),
        len(engine.rate_table),
    )

    yield

    logger.info("Shutting down %s", settings.app_name)


async def rating_error_handler(request: Request, exc: RatingError) -> JSONResponse:
    """Render rating errors that escape a handler as 500 responses."""
    logger.error("Unhandled rating error on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=500, content=exc.to_dict())


@beartype
def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()
    configure_logging(level=settings.log_level_value)

    app = FastAPI(
        title=settings.app_name,
        description="Rule-based auto insurance premium calculation",
        version=__version__,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
    )

    app.add_exception_handler(RatingError, rating_error_handler)  # type: ignore[arg-type]

    # Include API routers
    app.include_router(v1_router)

    # Root endpoint
    @app.get("/")
    async def root() -> APIInfo:
        """Root endpoint returning API information."""
        return APIInfo(
            name=settings.app_name,
            version=__version__,
            status="operational",
            environment=settings.api_env,
        )

    return app


# Create the application instance
app = create_app()


@beartype
def main() -> None:
    """Run the main application entry point."""
    settings = get_settings()

    uvicorn.run(
        "auto_rating.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        log_level=settings.log_level.lower() if not settings.is_production else "error",
    )


if __name__ == "__main__":
    main()
