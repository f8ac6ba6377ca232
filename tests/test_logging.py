"""Logger configuration tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from vanitic import cli
from vanitic.generator import GenerateResult
from vanitic.logging import configure_logging, get_logger


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("vanitic")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    for handler in saved[2]:
        logger.addHandler(handler)


def test_get_logger_names() -> None:
    assert get_logger().name == "vanitic"
    assert get_logger("sync").name == "vanitic.sync"


def test_verbose_sets_debug_level(restore_logger) -> None:
    assert configure_logging(verbose=True).level == logging.DEBUG
    assert configure_logging().level == logging.INFO


def test_repeated_configuration_does_not_stack_handlers(restore_logger) -> None:
    configure_logging()
    configure_logging()
    assert len(restore_logger.handlers) == 1


def test_log_file_receives_messages(tmp_path: Path, restore_logger) -> None:
    log_file = tmp_path / "vanitic.log"
    configure_logging(verbose=True, log_file=log_file)

    get_logger("sync").debug("Cloning %s", "https://example.com/foo.git")

    assert len(restore_logger.handlers) == 2
    assert "DEBUG vanitic.sync: Cloning https://example.com/foo.git" in log_file.read_text(encoding="utf-8")


def test_cli_log_flag_writes_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_logger) -> None:
    log_file = tmp_path / "run.log"
    monkeypatch.setattr(cli, "generate", lambda options: GenerateResult())

    assert cli.main(["-out", str(tmp_path / "pkg"), "-log", str(log_file)]) == 0

    assert "Wrote 0 pages for 0 repositories" in log_file.read_text(encoding="utf-8")
