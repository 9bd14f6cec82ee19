"""Process-wide logging setup for the wsdemo server."""

import logging
import logging.handlers
import os
import sys
from datetime import datetime
from pathlib import Path

from wsdemo import PACKAGE

FILE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
FILE_DATEFMT = "%d.%m.%Y %H:%M:%S"
CONSOLE_FORMAT = "%(levelname)s %(message)s"
MAX_LOG_BYTES = 10 * 1024**2


def get_log_directory() -> Path:
    """Per-user directory the server writes its log files to."""
    if sys.platform.startswith("win"):
        return Path.home() / "AppData" / "Local" / PACKAGE / "Logs"
    return Path.home() / ".config" / PACKAGE / "logs"


def clean_old_logs(log_dir: Path, max_files: int = 5):
    """Delete the oldest ``*.log`` files in ``log_dir`` until ``max_files`` are left."""
    if not log_dir.exists():
        return

    by_age = sorted(log_dir.glob("*.log"), key=os.path.getmtime)
    for stale in by_age[: max(len(by_age) - max_files, 0)]:
        stale.unlink()


class PaddedLevelFormatter(logging.Formatter):
    """Pads the level name so messages line up in the log file."""

    def format(self, record):
        record.levelname = record.levelname.ljust(8)
        return super().format(record)


def configure_logger(
    log_level: int = logging.DEBUG, log_dir: Path | None = None, max_log_files: int = 5
) -> Path:
    """Send every log record to a timestamped log file and to the console.

    Only the root logger carries handlers. Loggers created by Flask, engineio
    or socketio before this call lose theirs and propagate to root, so each
    record is written exactly once per handler.

    Args:
        log_level (int): Level for root and every existing logger. Defaults to logging.DEBUG.
        log_dir (Path | None): Where to store the logs. Defaults to get_log_directory().
        max_log_files (int): Previous log files to keep. Defaults to 5.

    Returns:
        Path: the file this run logs to.
    """
    log_dir = log_dir or get_log_directory()
    clean_old_logs(log_dir=log_dir, max_files=max_log_files)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_filename = log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log")

    file_handler = logging.handlers.RotatingFileHandler(
        log_filename, maxBytes=MAX_LOG_BYTES, backupCount=5
    )
    file_handler.setFormatter(PaddedLevelFormatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    logging.basicConfig(level=log_level, handlers=[file_handler, stream_handler], force=True)

    for logger in logging.root.manager.loggerDict.values():
        if isinstance(logger, logging.Logger):
            logger.handlers.clear()
            logger.propagate = True
            logger.setLevel(log_level)

    return log_filename
