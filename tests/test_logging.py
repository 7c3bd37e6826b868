import logging

import pytest
from typer.testing import CliRunner

from rune.cli import app
from rune.logging import configure_logging, get_logger, resolve_level


@pytest.fixture
def rune_logger():
    logger = logging.getLogger("rune")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_loggers_share_the_rune_namespace():
    assert get_logger("rune.engine").name == "rune.engine"
    assert get_logger("dice").name == "rune.dice"
    assert get_logger("rune").name == "rune"


def test_resolve_level(monkeypatch):
    assert resolve_level() == logging.WARNING
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    monkeypatch.setenv("RUNE_LOG_LEVEL", "info")
    assert resolve_level() == logging.INFO
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_configure_logging_sets_package_level(monkeypatch, rune_logger):
    monkeypatch.setenv("RUNE_LOG_LEVEL", "ERROR")
    configure_logging()
    assert rune_logger.level == logging.ERROR
    assert get_logger("engine").getEffectiveLevel() == logging.ERROR
    configure_logging("debug")
    assert rune_logger.level == logging.DEBUG


def test_cli_rejects_bad_log_level(monkeypatch, rune_logger):
    monkeypatch.setenv("RUNE_LOG_LEVEL", "chatty")
    result = CliRunner().invoke(app, ["check", "--value", "1", "--dice", "3,3"])
    assert result.exit_code == 1
    assert "Unknown log level: chatty" in result.output


def test_cli_verbose_flag(rune_logger):
    result = CliRunner().invoke(app, ["-v", "check", "--value", "1", "--dice", "3,3"])
    assert result.exit_code == 0, result.output
    assert rune_logger.level == logging.DEBUG
