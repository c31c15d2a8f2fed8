"""Logging configuration for freesms."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FILE = "~/.config/freesms/logs/freesms.log"
MAX_LOG_FILE_BYTES = 5 * 1024 * 1024  # 5 MiB per rotated file.
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
NOISY_LIBRARIES = ("urllib3", "requests", "charset_normalizer")


def resolve_log_file_path(log_file: Union[str, Path]) -> Path:
    """Expand ``~`` in a configured log path."""
    return Path(log_file).expanduser()


def setup_logging(
    level_name: str = "INFO", log_file: Optional[Union[str, Path]] = None
) -> None:
    """Configure the root logger to write to a rotating file.

    Nothing is configured when ``log_file`` is empty, so library users keep
    full control of logging.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)

    if not log_file:
        return
    log_path = resolve_log_file_path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = RotatingFileHandler(
        log_path,
        mode="a",
        maxBytes=MAX_LOG_FILE_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Remove existing handlers to avoid duplicates if re-initialized
    for existing_handler in list(logger.handlers):
        logger.removeHandler(existing_handler)
        existing_handler.close()

    logger.addHandler(handler)

    for lib in NOISY_LIBRARIES:
        logging.getLogger(lib).setLevel(logging.WARNING)


def mask_user_id(user_id: str) -> str:
    """Hide all but the first four characters of a user id."""
    if len(user_id) >= 4:
        return f"{user_id[:4]}****"
    return "****"
