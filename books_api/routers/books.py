# books_api/routers/books.py

import asyncio
from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Response

from books_api.core.dependencies import get_book_service
from books_api.core.exceptions import (
    BookNotFoundError,
    internal_server_http_error,
    not_found_http_error,
)
from books_api.core.logging import get_logger
from books_api.schemas.book import Book, BookCreate
from books_api.services.book_service import BookService


logger = get_logger(__name__)

router = APIRouter(tags=["Books"])

NOT_FOUND_RESPONSE = {404: {"description": "Book was not found"}}
SERVER_ERROR_RESPONSE = {500: {"description": "Some server error"}}


@router.get("", summary="Returns a list of all the books")
@router.get("/", include_in_schema=False)
async def list_books(
    service: Annotated[BookService, Depends(get_book_service)],
) -> list[Book]:
    try:
        books = await asyncio.to_thread(service.list_books)
        logger.info("Retrieved books list", count=len(books))
        return books
    except Exception as e:
        logger.error("Failed to retrieve books list", error=str(e))
        raise internal_server_http_error(
            "Failed to retrieve books list", {"error": str(e)}
        )


@router.get("/{book_id}", summary="Get the book by id", responses=NOT_FOUND_RESPONSE)
async def get_book(
    book_id: str,
    service: Annotated[BookService, Depends(get_book_service)],
) -> Book:
    try:
        book = await asyncio.to_thread(service.get_book, book_id)
        logger.info("Retrieved book", book_id=book_id)
        return book
    except BookNotFoundError:
        logger.warning("Book not found", book_id=book_id)
        raise not_found_http_error("Book", book_id)
    except Exception as e:
        logger.error("Failed to retrieve book", book_id=book_id, error=str(e))
        raise internal_server_http_error("Failed to retrieve book", {"error": str(e)})


@router.post("", summary="Create a new book", responses=SERVER_ERROR_RESPONSE)
@router.post("/", include_in_schema=False)
async def create_book(
    payload: BookCreate,
    service: Annotated[BookService, Depends(get_book_service)],
) -> Book:
    try:
        book = await asyncio.to_thread(service.create_book, payload.model_dump())
        logger.info("Created book", book_id=book["id"])
        return book
    except Exception as e:
        logger.error("Failed to create book", error=str(e))
        raise internal_server_http_error("Failed to create book", {"error": str(e)})


@router.put(
    "/{book_id}",
    summary="Update specific book by its id",
    responses={**NOT_FOUND_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def update_book(
    book_id: str,
    patch: Annotated[Dict[str, Any], Body()],
    service: Annotated[BookService, Depends(get_book_service)],
) -> Optional[Book]:
    try:
        book = await asyncio.to_thread(service.update_book, book_id, patch)
        logger.info("Updated book", book_id=book_id, fields=sorted(patch))
        return book
    except BookNotFoundError:
        logger.warning("Book not found for update", book_id=book_id)
        raise not_found_http_error("Book", book_id)
    except Exception as e:
        logger.error("Failed to update book", book_id=book_id, error=str(e))
        raise internal_server_http_error("Failed to update book", {"error": str(e)})


@router.delete(
    "/{book_id}",
    summary="Delete the book by id",
    responses={**NOT_FOUND_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def delete_book(
    book_id: str,
    service: Annotated[BookService, Depends(get_book_service)],
) -> Response:
    try:
        await asyncio.to_thread(service.delete_book, book_id)
        logger.info("Deleted book", book_id=book_id)
        return Response(status_code=200)
    except BookNotFoundError:
        logger.warning("Book not found for deletion", book_id=book_id)
        raise not_found_http_error("Book", book_id)
    except Exception as e:
        logger.error("Failed to delete book", book_id=book_id, error=str(e))
        raise internal_server_http_error("Failed to delete book", {"error": str(e)})
