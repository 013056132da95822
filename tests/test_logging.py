"""Tests for the logging formatters."""

import json
import logging

import pytest

from locallibrary.infrastructure.logging.formatters import get_formatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("locallibrary.test", logging.INFO, __file__, 10, "Author created", None, None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_extra_context():
    output = json.loads(get_formatter("json").format(_record(author_id=7)))

    assert output["message"] == "Author created"
    assert output["level"] == "INFO"
    assert output["author_id"] == 7


def test_structured_formatter_quotes_strings():
    output = get_formatter("structured").format(_record(path="/catalog", status_code=404))

    assert 'message="Author created"' in output
    assert 'path="/catalog"' in output
    assert "status_code=404" in output


def test_unknown_formatter():
    with pytest.raises(ValueError):
        get_formatter("xml")
