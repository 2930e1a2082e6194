"""Logging setup for the migration measurement tool."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_path: Optional[Union[str, Path]] = None,
                  max_bytes: int = 5 * 1024 * 1024,
                  backup_count: int = 3) -> Optional[Path]:
    """Configure console logging and, if ``log_path`` is given, a rotating log file.

    Calling this more than once does not add duplicate handlers.

    Returns:
        The resolved log file path, or None when logging to the console only
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # Let handlers control their own levels

    existing_handlers = [type(h).__name__ for h in root.handlers]

    if "StreamHandler" not in existing_handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        console_handler.setLevel(level)
        root.addHandler(console_handler)

    resolved = None
    if log_path:
        resolved = Path(log_path).expanduser()
        resolved.parent.mkdir(parents=True, exist_ok=True)
        if "RotatingFileHandler" not in existing_handlers:
            file_handler = logging.handlers.RotatingFileHandler(
                resolved, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            file_handler.setLevel(logging.DEBUG)
            root.addHandler(file_handler)
        resolved = resolved.resolve()

    logging.getLogger(__name__).debug("Logging initialized (level=%s, file=%s)",
                                      logging.getLevelName(level), resolved)
    return resolved


def install_qt_message_handler():
    """Route Qt warnings and errors into the 'qt' logger"""
    from PySide6.QtCore import QtMsgType, qInstallMessageHandler

    levels = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def qt_message_handler(mode, context, message):
        logging.getLogger("qt").log(levels.get(mode, logging.INFO), message)

    qInstallMessageHandler(qt_message_handler)
