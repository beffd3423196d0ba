# books_api/core/dependencies.py
"""
Centralized dependency injection for FastAPI.
The store is owned by the composition root (create_app) and reached through
app.state, so handlers never touch a module-level handle.
"""

from typing import Annotated
from fastapi import Depends, Request
from tinydb import TinyDB
from tinydb.table import Table

from books_api.core.config import Settings
from books_api.services.book_service import BookService
from books_api.core.logging import get_logger

logger = get_logger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the application was built with."""
    return request.app.state.settings


def get_database(request: Request) -> TinyDB:
    """Shared database handle opened at startup."""
    return request.app.state.database


def get_book_table(
    settings: Annotated[Settings, Depends(get_app_settings)],
    database: Annotated[TinyDB, Depends(get_database)],
) -> Table:
    return database.table(settings.BOOKS_COLLECTION)


def get_book_service(
    settings: Annotated[Settings, Depends(get_app_settings)],
    table: Annotated[Table, Depends(get_book_table)],
) -> BookService:
    """Get book service dependency - created for each request."""
    logger.debug("Creating book service instance")
    return BookService(
        table,
        id_length=settings.ID_LENGTH,
        strict=settings.STRICT_NOT_FOUND,
    )
