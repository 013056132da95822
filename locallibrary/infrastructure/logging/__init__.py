"""Centralized logging for the catalog.

Usage:
    ```python
    from locallibrary.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Book instance deleted", extra={"book_instance_id": 3})
    ```
"""

from .config import configure_testing_logging, setup_logging_configuration
from .factory import configure_logging, get_logger, mark_logging_configured

__all__ = [
    "get_logger",
    "configure_logging",
    "configure_testing_logging",
    "mark_logging_configured",
    "setup_logging_configuration",
]
