"""Common constants used across the application."""

from typing import Dict, Type

from fastapi import status

from .exceptions import DomainError, ResourceNotFoundError

EXCEPTION_STATUS_MAPPING: Dict[Type[DomainError], int] = {
    ResourceNotFoundError: status.HTTP_404_NOT_FOUND,
}

AUTHOR_LIST_URL = "/catalog/authors"
BOOK_INSTANCE_LIST_URL = "/catalog/bookinstances"
