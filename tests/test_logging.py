"""Tests for structured logging and error formatting."""

import json
import logging

from modregistry.core.errors import ConfigError, IncompatibleModError, RegistryError, format_exception_chain
from modregistry.core.logging import ColoredFormatter, JSONFormatter, get_logger


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("modregistry.registry", logging.INFO, __file__, 1, "Registered mod: Alpha", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    record = _record(component="registry", mod="Alpha.Mod", package="alpha_mod", extra_data={"rules": 3})

    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["message"] == "Registered mod: Alpha"
    assert data["mod"] == "Alpha.Mod"
    assert data["package"] == "alpha_mod"
    assert data["rules"] == 3


def test_colored_formatter_context():
    line = ColoredFormatter().format(_record(component="registry", mod="Alpha.Mod"))

    assert "[registry]" in line
    assert "Registered mod: Alpha (mod=Alpha.Mod)" in line


def test_logger_splits_known_fields(caplog):
    logger = get_logger("test")

    with caplog.at_level(logging.INFO, logger="modregistry"):
        logger.info("hello", component="cli", mod="A.Mod", path="/tmp/x")

    record = caplog.records[-1]
    assert record.component == "cli"
    assert record.mod == "A.Mod"
    assert record.extra_data == {"path": "/tmp/x"}


def test_get_logger_is_cached():
    assert get_logger("registry") is get_logger("registry")


def test_error_formatting():
    error = ConfigError("Invalid incompatibility rules", config_path="host.json")

    text = error.format_user_friendly()

    assert "Invalid incompatibility rules" in text
    assert "Details: Config file: host.json" in text
    assert "MODREGISTRY_CONFIG" in text


def test_incompatible_error_details():
    error = IncompatibleModError("Skipped X 1.5", unique_id="X", version="1.5")

    assert error.details == "Mod: X, Version: 1.5"
    assert isinstance(error, RegistryError)


def test_exception_chain():
    cause = ValueError("bad regex")
    error = ConfigError("Invalid incompatibility rules", cause=cause)

    text = format_exception_chain(error)

    assert "Invalid incompatibility rules" in text
    assert "Caused by:" in text
    assert "ValueError: bad regex" in text
