"""Logging configuration with console and rotating file handlers"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

SESSION_LOGS_KEPT = 5
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB


def _cleanup_old_sessions(log_path: Path) -> None:
    """Delete session logs beyond the retention limit (newest kept)"""
    existing = sorted(log_path.parent.glob(f"{log_path.stem}_*.log"), reverse=True)
    # The session about to start counts toward the limit
    for old_log in existing[SESSION_LOGS_KEPT - 1:]:
        try:
            old_log.unlink()
        except OSError as e:
            logging.getLogger(__name__).debug(f"Could not delete old log {old_log}: {e}")


def setup_logging(
    log_file: Optional[str] = "logs/wikisearch.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Optional[Path]:
    """
    Configure logging with two destinations:
    - Console (stderr): brief logs, INFO by default
    - File: detailed logs, DEBUG by default, one file per session

    Console output goes to stderr so that search results on stdout stay
    clean for piping.

    Rotation policy:
    - New log file per run (timestamp-based naming)
    - Keep last 5 session files (cleanup on startup)
    - Rotate when a file reaches 10MB

    Args:
        log_file: Base path to log file; None disables file logging
        console_level: Console logging level
        file_level: File logging level

    Returns:
        Path of this session's log file (None when file logging is off)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    session_log = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _cleanup_old_sessions(log_path)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

        file_handler = RotatingFileHandler(
            session_log,
            mode='a',
            maxBytes=MAX_LOG_BYTES,
            backupCount=10,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    logging.debug(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={session_log or 'disabled'} ({logging.getLevelName(file_level)})"
    )

    return session_log
