# books_api/services/book_service.py
from typing import Any, Dict, List, Optional

from tinydb import where
from tinydb.table import Table

from books_api.core.database import storage_errors
from books_api.core.exceptions import BookNotFoundError
from books_api.core.logging import LoggerMixin
from books_api.utils.ids import generate_id


MAX_ID_ATTEMPTS = 10

Record = Dict[str, Any]


class BookService(LoggerMixin):
    """Maps each book operation onto a single table call.
    Created per request around the shared table handle."""

    def __init__(self, table: Table, id_length: int = 8, strict: bool = True):
        self.table = table
        self.id_length = id_length
        self.strict = strict

    def list_books(self) -> List[Record]:
        with storage_errors("read books"):
            return [dict(doc) for doc in self.table.all()]

    def get_book(self, book_id: str) -> Record:
        with storage_errors("read book"):
            doc = self.table.get(where("id") == book_id)
        if doc is None:
            raise BookNotFoundError(book_id)
        return dict(doc)

    def create_book(self, data: Dict[str, Any]) -> Record:
        book = {**data, "id": self._new_id()}
        with storage_errors("create book"):
            self.table.insert(book)
        return book

    def update_book(self, book_id: str, patch: Dict[str, Any]) -> Optional[Record]:
        """Shallow-merge patch onto the stored book; id is never overwritten."""
        patch = {k: v for k, v in patch.items() if k != "id"}
        with storage_errors("update book"):
            updated = self.table.update(patch, where("id") == book_id)
            doc = self.table.get(where("id") == book_id) if updated else None
        if doc is None:
            if self.strict:
                raise BookNotFoundError(book_id)
            self.logger.info("Update on unknown book ignored", book_id=book_id)
            return None
        return dict(doc)

    def delete_book(self, book_id: str) -> None:
        with storage_errors("delete book"):
            removed = self.table.remove(where("id") == book_id)
        if not removed:
            if self.strict:
                raise BookNotFoundError(book_id)
            self.logger.info("Delete on unknown book ignored", book_id=book_id)

    def _new_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            book_id = generate_id(self.id_length)
            with storage_errors("read book"):
                taken = self.table.contains(where("id") == book_id)
            if not taken:
                return book_id
        raise RuntimeError(
            f"Could not generate a unique id after {MAX_ID_ATTEMPTS} attempts"
        )
