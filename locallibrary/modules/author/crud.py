"""CRUD operations for author entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Author

author_crud: FastCRUD = FastCRUD(Author)
