# books_api/main.py

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from tinydb import TinyDB

from books_api.core.config import Settings, get_settings
from books_api.core.database import open_database
from books_api.core.exceptions import ConfigurationError, StorageError
from books_api.core.logging import setup_logging, get_logger
from books_api.routers.books import router as books_router


logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[TinyDB] = None,
) -> FastAPI:
    """Build the application around one shared database handle.

    The handle is opened here, in the lifespan, unless one is injected, and
    handed to request handlers through ``app.state``.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan - startup and shutdown"""
        setup_logging(log_level=settings.LOG_LEVEL, enable_json=settings.LOG_JSON)
        logger.info("Starting Library API", database_file=settings.DATABASE_FILE)

        owned = database is None
        db = None
        try:
            db = open_database(settings.DATABASE_FILE) if owned else database
            app.state.settings = settings
            app.state.database = db
            logger.info("Database opened", table=settings.BOOKS_COLLECTION)

            yield

        except (ConfigurationError, StorageError) as e:
            logger.error("Startup failed", error=e.message, details=e.details)
            raise
        finally:
            if owned and db is not None:
                db.close()
            logger.info("Shutting down Library API")

    app = FastAPI(
        title=settings.APP_TITLE,
        version=settings.APP_VERSION,
        description="The books managing API",
        lifespan=lifespan,
    )
    app.include_router(books_router, prefix="/books")
    return app


app = create_app()
