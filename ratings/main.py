import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ratings.api.errors import register_error_handlers
from ratings.api.v1.routes.ratings import router as ratings_router
from ratings.config import settings
from ratings.core.database_init import initialize_database

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info("Starting up ratings service...")

    if settings.USE_DB_REPOS and not initialize_database():
        # Requests will fail with internal errors until the database is reachable
        logger.error("Database initialization failed")

    yield

    logger.info("Shutting down ratings service...")


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    app = FastAPI(
        title="Ratings Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(ratings_router, prefix="/api/v1")

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
