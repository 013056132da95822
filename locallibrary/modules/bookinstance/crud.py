"""CRUD operations for book instance entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import BookInstance

book_instance_crud: FastCRUD = FastCRUD(BookInstance)
