"""Logging configuration for stdout and optional file output."""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def setup_logging(
    log_dir: Path | str | None = None,
    level: int | str = logging.INFO,
) -> Path | None:
    """Configure the root logger for the API process.

    Output always goes to stdout. When *log_dir* is given, a file named after
    the start time (``logs/2026-01-31_14-30-00.log``) is added as well and its
    path is returned.
    """
    if isinstance(level, str):
        level = level.upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # uvicorn reloads call this again
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    root_logger.addHandler(stdout_handler)

    if log_dir is None:
        return None

    dir_path = Path(log_dir)
    dir_path.mkdir(parents=True, exist_ok=True)
    file_path = dir_path / f"{datetime.now(tz=UTC).strftime(LOG_FILE_TIMESTAMP_FORMAT)}.log"
    file_handler = logging.FileHandler(file_path, encoding="utf-8")
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    logging.getLogger(__name__).info("Writing logs to %s", file_path)
    return file_path


__all__ = ["LOG_DATE_FORMAT", "LOG_FORMAT", "setup_logging"]
