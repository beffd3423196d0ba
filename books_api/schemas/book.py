# books_api/schemas/book.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Any


class BookCreate(BaseModel):
    """Payload for creating a book. Only presence of title and author is
    checked; unknown fields are stored verbatim."""

    model_config = ConfigDict(extra="allow")

    title: Any = Field(description="the title of the book")
    author: Any = Field(description="the author of the book")


class Book(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(description="auto-generated id of the book")
    title: Any = Field(default=None, description="the title of the book")
    author: Any = Field(default=None, description="the author of the book")
