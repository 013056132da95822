"""Sanitizing and validation helpers for HTML form input.

Form bodies are parsed into ``*Form`` models whose string fields are trimmed
and HTML-escaped on the way in. The sanitized form is then validated into a
create schema; a failure is turned into :class:`FormError` messages and the
form is rendered again with the sanitized values.
"""

import re
from datetime import date, datetime
from typing import Any, List, Optional

from markupsafe import escape
from pydantic import ValidationError
from pydantic_core import PydanticCustomError

from .schemas import FormError

_ALPHANUMERIC = re.compile(r"^[0-9A-Za-z]+$")


def sanitize(value: Any) -> str:
    """Trim surrounding whitespace and escape characters unsafe in HTML."""
    if value is None:
        return ""
    return str(escape(str(value).strip()))


def require_alphanumeric(value: str, missing_message: str, invalid_message: str) -> str:
    """Validate a required, alphanumeric (ASCII letters and digits) field."""
    if not value:
        raise PydanticCustomError("required", missing_message)
    if not _ALPHANUMERIC.match(value):
        raise PydanticCustomError("alphanumeric", invalid_message)
    return value


def require_text(value: str, missing_message: str) -> str:
    """Validate a required, non-empty field."""
    if not value:
        raise PydanticCustomError("required", missing_message)
    return value


def parse_optional_date(value: Any, invalid_message: str) -> Optional[date]:
    """Parse an optional ISO-8601 date or date-time into a ``date``.

    Blank values mean "not given" and yield ``None``.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value)
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise PydanticCustomError("iso_date", invalid_message) from None


def form_errors(exc: ValidationError) -> List[FormError]:
    """Convert a pydantic validation error into the messages shown on a form."""
    return [FormError(field=str(error["loc"][0]) if error["loc"] else "", msg=error["msg"]) for error in exc.errors()]
