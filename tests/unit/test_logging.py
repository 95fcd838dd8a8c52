"""Tests for smartcrop.utils.logging module."""

from __future__ import annotations

import json
import logging

import pytest

from smartcrop.utils.logging import (
    bind_crop_context,
    clear_crop_context,
    configure_logging,
    get_logger,
)


def _last_json_record(caplog: pytest.LogCaptureFixture) -> dict[str, object]:
    assert caplog.records, "Expected at least one log record"
    return json.loads(caplog.records[-1].getMessage())


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="WARNING", log_format="console")
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_default_settings_do_not_error() -> None:
    configure_logging()


def test_get_logger_returns_logger_proxy() -> None:
    configure_logging(level="DEBUG", log_format="console")
    logger = get_logger("test.module")
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")


def test_json_log_is_valid_and_contains_crop_context(
    caplog: pytest.LogCaptureFixture,
) -> None:
    configure_logging(level="INFO", log_format="json")
    bind_crop_context(source="photo.png", target="800x600")

    logger = get_logger("test.json")
    logger.info("hello", foo="bar")
    payload = _last_json_record(caplog)

    assert payload["event"] == "hello"
    assert payload["foo"] == "bar"
    assert payload["source"] == "photo.png"
    assert payload["target"] == "800x600"
    assert payload["level"] == "info"
    assert payload["logger"] == "test.json"
    assert "timestamp" in payload


def test_json_log_omits_crop_context_when_unset(
    caplog: pytest.LogCaptureFixture,
) -> None:
    configure_logging(level="INFO", log_format="json")
    clear_crop_context()

    logger = get_logger("test.json.unset")
    logger.info("hello")
    payload = _last_json_record(caplog)

    assert payload["event"] == "hello"
    assert "source" not in payload
    assert "target" not in payload


def test_debug_suppressed_at_warning_level(caplog: pytest.LogCaptureFixture) -> None:
    configure_logging(level="WARNING", log_format="json")

    get_logger("test.quiet").debug("hidden")

    assert not [r for r in caplog.records if r.name == "test.quiet"]
