"""
Curriplan FastAPI Application

REST backend for the Curriculum → Grade → Book → Unit → Lesson → Stage →
Activity hierarchy.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from curriplan.config import settings
from curriplan.core.database import AsyncSessionLocal, close_db, get_db, init_db, ping
from curriplan.core.errors import ImportValidationError, ServiceError

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events.

    Startup:
    - Configure logging
    - Verify database connection
    - Create missing tables

    Shutdown:
    - Drain the connection pool
    """
    configure_logging()
    logger.info("Curriplan backend starting...")

    try:
        async with AsyncSessionLocal() as session:
            await ping(session)
        logger.info("Database connection verified")
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        raise

    await init_db()
    logger.info(f"API available under {settings.API_PREFIX}")

    yield

    logger.info("Curriplan backend shutting down...")
    await close_db()
    logger.info("Shutdown complete")


def register_exception_handlers(app: FastAPI) -> None:
    """Map exceptions to ``{"error": ...}`` JSON bodies."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(ImportValidationError)
    async def import_validation_handler(
        request: Request, exc: ImportValidationError
    ) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        # No route matches the method and path: both are "not found".
        if exc.status_code == 405 or (exc.status_code == 404 and exc.detail == "Not Found"):
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        return JSONResponse(
            status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI app instance
    """
    app = FastAPI(
        title="Curriplan",
        description="Curriculum hierarchy CRUD, tree read, and bulk import API",
        version="0.1.0",
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get(f"{settings.API_PREFIX}/health", tags=["Health"], response_model=None)
    async def health_check(db: AsyncSession = Depends(get_db)) -> JSONResponse:
        """Health check: acquires one pooled connection and runs SELECT 1."""
        try:
            await ping(db)
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return JSONResponse(
                status_code=500,
                content={
                    "status": "unhealthy",
                    "message": "Database connection failed",
                    "error": str(e),
                },
            )

        return JSONResponse(
            content={
                "status": "healthy",
                "message": "Server and database are running",
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

    # Register API routers
    from curriplan.api.v1 import curriculum, levels

    app.include_router(curriculum.router, prefix=settings.API_PREFIX)
    for router in levels.routers:
        app.include_router(router, prefix=settings.API_PREFIX)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "curriplan.main:app",
        host="0.0.0.0",  # nosec B104 - Intentional for containerized deployment
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
