"""Pydantic schemas for the catalog home page."""

from pydantic import BaseModel


class CatalogCounts(BaseModel):
    """Record counts shown on the catalog home page."""

    book_count: int = 0
    book_instance_count: int = 0
    book_instance_available_count: int = 0
    author_count: int = 0
    genre_count: int = 0
