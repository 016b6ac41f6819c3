"""Logging setup: console output plus size-rotated files under the log dir."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

# Scene fetches get their own file so network noise stays out of scriptura.log
SCENE_LOGGER = "scenes.client"


def _rotating_file(path: Path, level: int, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        str(path), maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[str | Path] = None,
    console_enabled: bool = True,
) -> None:
    """Route all loggers to ``scriptura.log`` and the scene client to ``scenes.log``.

    Safe to call repeatedly; handlers from a previous call are replaced.
    """
    log_dir = Path(log_dir or "./data/logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    if console_enabled:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        root.addHandler(console)
    root.addHandler(_rotating_file(log_dir / "scriptura.log", level, formatter))

    scene_logger = logging.getLogger(SCENE_LOGGER)
    scene_logger.handlers.clear()
    scene_logger.addHandler(_rotating_file(log_dir / "scenes.log", logging.DEBUG, formatter))

    logging.getLogger(__name__).debug("Logging ready: level=%s dir=%s", logging.getLevelName(level), log_dir)
