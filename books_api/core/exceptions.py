# books_api/core/exceptions.py
"""
Custom exceptions for the library application.
Provides structured error handling with clear error types and messages.
"""

from typing import Optional, Dict, Any
from fastapi import HTTPException


class LibraryError(Exception):
    """Base exception for all library operations."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(LibraryError):
    """Raised when application configuration is invalid."""

    pass


class StorageError(LibraryError):
    """Raised when the document store cannot be read or written."""

    pass


class BookNotFoundError(LibraryError):
    """Raised when no book matches the requested id."""

    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__("Book not found", {"resource": "Book", "identifier": book_id})


# HTTP Exception factories for FastAPI
def create_http_exception(
    status_code: int, message: str, details: Optional[Dict[str, Any]] = None
) -> HTTPException:
    """Create a structured HTTP exception."""
    detail = {"message": message}
    if details:
        detail["details"] = details
    return HTTPException(status_code=status_code, detail=detail)


def not_found_http_error(resource: str, identifier: str) -> HTTPException:
    """Create a 404 not found error."""
    return create_http_exception(
        404, f"{resource} not found", {"resource": resource, "identifier": identifier}
    )


def internal_server_http_error(
    message: str, details: Optional[Dict[str, Any]] = None
) -> HTTPException:
    """Create a 500 internal server error."""
    return create_http_exception(500, f"Internal server error: {message}", details)
