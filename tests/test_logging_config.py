"""Tests for logging configuration module."""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Iterator
from io import StringIO
from unittest.mock import patch

import pytest

from traitkit.logging_config import (
    NAMESPACE,
    JSONFormatter,
    TextFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def restore_namespace_logger() -> Iterator[None]:
    """Put the traitkit logger back the way configure_logging found it."""
    logger = logging.getLogger(NAMESPACE)
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def make_record(level: int = logging.INFO, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="traitkit.engine.compose",
        level=level,
        pathname="/path/to/compose.py",
        lineno=42,
        msg="Merged %d traits",
        args=(2,),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_formats_as_valid_json(self) -> None:
        """Output should be valid JSON with the core fields."""
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["message"] == "Merged 2 traits"
        assert data["level"] == "INFO"
        assert data["logger"] == "traitkit.engine.compose"
        assert "timestamp" in data
        assert "source" not in data
        assert "extra" not in data

    def test_includes_source_for_debug(self) -> None:
        """DEBUG records should carry source location."""
        data = json.loads(JSONFormatter().format(make_record(logging.DEBUG)))
        assert data["source"]["line"] == 42
        assert data["source"]["file"] == "/path/to/compose.py"

    def test_includes_extra_fields(self) -> None:
        """Fields passed through extra= should appear under extra."""
        data = json.loads(JSONFormatter().format(make_record(property="a")))
        assert data["extra"] == {"property": "a"}

    def test_includes_exception(self) -> None:
        """Exception info should be formatted into the output."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record(logging.ERROR)
            record.exc_info = sys.exc_info()
        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestTextFormatter:
    """Tests for text log formatter."""

    def test_strips_namespace_prefix(self) -> None:
        """Logger names should drop the traitkit prefix."""
        output = TextFormatter(use_colors=False).format(make_record())
        assert "[engine.compose] Merged 2 traits" in output
        assert "INFO" in output

    def test_appends_extra_fields(self) -> None:
        """Extra fields should be appended as key=value."""
        output = TextFormatter(use_colors=False).format(make_record(property="a"))
        assert output.endswith("property=a")

    def test_no_colors_when_not_tty(self) -> None:
        """Colors should be disabled when stderr is not a TTY."""
        with patch("sys.stderr", StringIO()):
            formatter = TextFormatter(use_colors=True)
        assert formatter.use_colors is False


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_single_handler(self) -> None:
        """Repeated configuration should leave exactly one handler."""
        configure_logging(level=logging.DEBUG, format_type="text")
        configure_logging(level=logging.DEBUG, format_type="text")
        logger = logging.getLogger(NAMESPACE)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_json_format(self) -> None:
        """format_type json should install JSONFormatter."""
        logger = configure_logging(level=logging.INFO, format_type="json")
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_defaults_from_settings(self) -> None:
        """Level and format should default to TraitSettings."""
        env = {"TRAITKIT_LOG_LEVEL": "WARNING", "TRAITKIT_LOG_FORMAT": "json"}
        with patch.dict(os.environ, env):
            logger = configure_logging()
        assert logger.level == logging.WARNING
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_writes_to_stderr(self) -> None:
        """Namespaced loggers should write through the stderr handler."""
        stream = StringIO()
        with patch("sys.stderr", stream):
            configure_logging(level=logging.INFO, format_type="json", use_colors=False)
            get_logger("engine.compose").info("hello")
        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "hello"
        assert data["logger"] == "traitkit.engine.compose"


class TestGetLogger:
    """Tests for get_logger."""

    def test_adds_namespace(self) -> None:
        """Bare names should be placed under the namespace."""
        assert get_logger("custom").name == "traitkit.custom"

    def test_keeps_namespaced_names(self) -> None:
        """Names already under the namespace should be kept."""
        assert get_logger("traitkit.engine.compose").name == "traitkit.engine.compose"
        assert get_logger("traitkit").name == "traitkit"

    def test_similar_prefix_is_namespaced(self) -> None:
        """A name that only shares the prefix text should still be namespaced."""
        assert get_logger("traitkitx").name == "traitkit.traitkitx"
