from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .settings import _work_dir


ROOT_LOGGER_NAME = "velfi"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LOGGER: logging.Logger | None = None


def _configure(log_dir: Path | None) -> logging.Logger:
    base = Path(log_dir) if log_dir is not None else _work_dir() / "logs"
    base.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = RotatingFileHandler(
        base / "app.log", maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.setFormatter(fmt)
    logger.addHandler(file_handler)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(fmt)
    logger.addHandler(console)
    return logger


def get_logger(name: str | None = None, *, log_dir: Path | None = None) -> logging.Logger:
    """Return the application logger, or a ``velfi.<name>`` child of it.

    The first call wires a rotating ``logs/app.log`` file (2 MiB x 3) under the
    work directory and a stdout stream; later calls reuse that setup.
    """
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = _configure(log_dir)
    if name:
        return _LOGGER.getChild(name)
    return _LOGGER


def set_level(level: str | int) -> int:
    """Apply ``level`` (name or number) to the application logger."""

    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {level}")
    else:
        value = level
    get_logger().setLevel(value)
    return value


def reset_logger() -> None:
    """Drop the cached logger so the next call reconfigures handlers."""

    global _LOGGER
    if _LOGGER is not None:
        for handler in list(_LOGGER.handlers):
            _LOGGER.removeHandler(handler)
            handler.close()
    _LOGGER = None
