"""Unit tests for structured logging configuration."""

import json

from passguard.core.config import Settings
from passguard.core.logging import (
    LoggingContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


def _json_settings() -> Settings:
    return Settings(environment="production", log_format="json", log_level="INFO")


def _last_entry(err: str) -> dict:
    return json.loads(err.strip().splitlines()[-1])


def test_json_output_goes_to_stderr(capsys):
    """Production logging renders JSON lines on stderr."""
    configure_logging(_json_settings())
    get_logger("passguard.test").info("Rule built", allowed=3)

    captured = capsys.readouterr()
    assert captured.out == ""
    entry = _last_entry(captured.err)
    assert entry["message"] == "Rule built"
    assert entry["level"] == "info"
    assert entry["allowed"] == 3
    assert "timestamp" in entry
    assert "event" not in entry


def test_level_filtering(capsys):
    """Entries below the configured level are dropped."""
    configure_logging(_json_settings())
    get_logger().debug("hidden")

    assert capsys.readouterr().err == ""


def test_logging_context(capsys):
    """Context values are added inside the block and removed after it."""
    configure_logging(_json_settings())
    logger = get_logger()

    with LoggingContext(command="check"):
        logger.info("inside")
    logger.info("outside")

    lines = capsys.readouterr().err.strip().splitlines()
    assert json.loads(lines[0])["command"] == "check"
    assert "command" not in json.loads(lines[1])


def test_bind_and_clear_context(capsys):
    configure_logging(_json_settings())
    logger = get_logger()

    bind_context(run="r1")
    logger.info("bound")
    clear_context()
    logger.info("cleared")

    lines = capsys.readouterr().err.strip().splitlines()
    assert json.loads(lines[0])["run"] == "r1"
    assert "run" not in json.loads(lines[1])


def test_console_output(capsys):
    """Development logging uses the console renderer."""
    configure_logging(Settings(environment="development", log_level="INFO"))
    get_logger().info("hello console")

    assert "hello console" in capsys.readouterr().err
