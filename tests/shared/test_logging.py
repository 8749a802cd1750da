from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from syndicate_backend.shared.logging import LOG_FORMAT, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_stdout_only_without_log_dir() -> None:
    assert setup_logging(level="warning") is None

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_log_file_is_created_in_log_dir(tmp_path: Path) -> None:
    log_file = setup_logging(tmp_path / "logs", "DEBUG")

    logging.getLogger("syndicate_backend.tests").debug("ledger ready")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file is not None
    assert log_file.parent == tmp_path / "logs"
    assert "ledger ready" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_does_not_duplicate_handlers(tmp_path: Path) -> None:
    setup_logging(tmp_path)
    setup_logging(tmp_path)

    assert len(logging.getLogger().handlers) == 2
