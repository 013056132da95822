"""Utility functions for mapping domain exceptions to HTTP status codes."""

from fastapi import status

from ..constants import EXCEPTION_STATUS_MAPPING
from ..exceptions import DomainError


def map_exception(error: DomainError) -> int:
    """Map a domain exception to the HTTP status code it should be rendered with."""
    for exception_class, status_code in EXCEPTION_STATUS_MAPPING.items():
        if isinstance(error, exception_class):
            return status_code

    return status.HTTP_500_INTERNAL_SERVER_ERROR
