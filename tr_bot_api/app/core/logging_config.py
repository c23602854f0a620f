"""
Logging configuration for the API.

``setup_logging`` attaches the API's handlers to the root logger: one
console handler, plus a file handler when ``Settings.log_file`` is set.
Handlers are named, so calling it again (one ``create_app`` per test,
for instance) neither duplicates output nor disturbs handlers installed
by other tools.  The uvicorn loggers follow the configured level.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "tr_bot_api.console"
FILE_HANDLER_PREFIX = "tr_bot_api.file:"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(app_settings: Settings) -> None:
    """Configure the root logger from ``app_settings``.

    ``log_level`` is a level name such as ``"DEBUG"`` (case
    insensitive, unknown names fall back to ``INFO``).  ``log_file``
    is resolved relative to the current working directory.
    """
    level = getattr(logging, app_settings.log_level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if app_settings.log_file:
        log_path = Path(app_settings.log_file).resolve()
        file_handler_name = f"{FILE_HANDLER_PREFIX}{log_path}"
        if not _has_handler(root, file_handler_name):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(file_handler_name)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
