"""Unit tests for BookService and id generation."""

import re

import pytest

from books_api.core.exceptions import BookNotFoundError, StorageError
from books_api.services import book_service as book_service_module
from books_api.services.book_service import BookService
from books_api.utils.ids import generate_id


@pytest.fixture
def service(database):
    return BookService(database.table("books"))


class TestGenerateId:
    @pytest.mark.parametrize("length", [1, 5, 8, 21])
    def test_exact_length_and_alphabet(self, length):
        value = generate_id(length)
        assert len(value) == length
        assert re.fullmatch(r"[A-Za-z0-9_-]+", value)

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValueError):
            generate_id(0)


class TestBookService:
    def test_create_and_get(self, service):
        book = service.create_book({"title": "Dune", "author": "Herbert"})
        assert len(book["id"]) == 8
        assert service.get_book(book["id"]) == book

    def test_get_missing(self, service):
        with pytest.raises(BookNotFoundError) as exc_info:
            service.get_book("missing")
        assert exc_info.value.details == {"resource": "Book", "identifier": "missing"}

    def test_create_retries_on_collision(self, service, monkeypatch):
        service.table.insert({"id": "taken"})
        ids = iter(["taken", "fresh"])
        monkeypatch.setattr(book_service_module, "generate_id", lambda length: next(ids))

        book = service.create_book({"title": "Dune", "author": "Herbert"})
        assert book["id"] == "fresh"

    def test_create_gives_up_after_repeated_collisions(self, service, monkeypatch):
        service.table.insert({"id": "taken"})
        monkeypatch.setattr(book_service_module, "generate_id", lambda length: "taken")

        with pytest.raises(RuntimeError):
            service.create_book({"title": "Dune", "author": "Herbert"})

    def test_update_returns_merged_record(self, service):
        book = service.create_book({"title": "Dune", "author": "Herbert"})
        updated = service.update_book(book["id"], {"author": "Frank Herbert", "id": "x"})
        assert updated == {"id": book["id"], "title": "Dune", "author": "Frank Herbert"}

    def test_missing_id_strict(self, service):
        with pytest.raises(BookNotFoundError):
            service.update_book("missing", {"title": "X"})
        with pytest.raises(BookNotFoundError):
            service.delete_book("missing")

    def test_missing_id_lenient(self, database):
        lenient = BookService(database.table("books"), strict=False)
        assert lenient.update_book("missing", {"title": "X"}) is None
        assert lenient.delete_book("missing") is None

    def test_custom_id_length(self, database):
        service = BookService(database.table("books"), id_length=12)
        assert len(service.create_book({"title": "Dune", "author": "Herbert"})["id"]) == 12

    def test_failed_create_is_not_stored(self, service, failing_write):
        with pytest.raises(StorageError):
            service.create_book({"title": "Dune", "author": "Herbert"})
        assert service.list_books() == []
