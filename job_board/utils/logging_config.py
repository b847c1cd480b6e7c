"""Logging for the job board: rotating file plus stderr."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILENAME = "job_board.log"

# Library loggers that share the job_board handlers.
LIBRARY_LOGGERS = ("sqlalchemy.engine",)


def resolve_level(level: Union[int, str]) -> int:
    """Map a level name ("debug", "INFO") or number to a logging level."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logging(
    log_dir: str = "logs",
    level: Union[int, str] = logging.INFO,
    sql_echo: bool = False,
) -> logging.Logger:
    """Send the job_board logger tree to log_dir/job_board.log and stderr.

    stdout is left to CLI output (rendered Markdown, stats). With sql_echo the
    SQLAlchemy engine log goes to the same handlers at INFO.
    """
    level = resolve_level(level)
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = RotatingFileHandler(
        log_path / LOG_FILENAME,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    handlers = [file_handler, console_handler]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logger = logging.getLogger("job_board")
    logger.setLevel(level)
    _replace_handlers(logger, handlers)

    for name in LIBRARY_LOGGERS:
        library_logger = logging.getLogger(name)
        if sql_echo:
            library_logger.setLevel(logging.INFO)
            library_logger.propagate = False
            _replace_handlers(library_logger, handlers)
        else:
            _replace_handlers(library_logger, [])
            library_logger.propagate = True

    return logger


def _replace_handlers(logger: logging.Logger, handlers: list):
    # Re-init must not stack handlers or leak open log files
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        logger.addHandler(handler)
