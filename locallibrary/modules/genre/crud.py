"""CRUD operations for genre entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Genre

genre_crud: FastCRUD = FastCRUD(Genre)
