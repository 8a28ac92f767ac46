"""Tests for compscan.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from compscan.logging import configure_logging, get_logger


def test_get_logger_uses_package_hierarchy() -> None:
    assert get_logger("pipeline").name == "compscan.pipeline"
    assert get_logger().name == "compscan"


def test_configure_logging_does_not_stack_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "scan.log"

    configure_logging(verbose=True, log_file=log_file)
    logger = configure_logging(verbose=True, log_file=log_file)
    get_logger("scanner").debug("walking %s", "src")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.flush()
    assert "compscan.scanner: walking src" in log_file.read_text(encoding="utf-8")

    configure_logging()
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
