"""Logging configuration with console and rotating file handlers"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Session log files kept on disk (including the new one)
LOG_RETENTION = 5
LOG_MAX_BYTES = 10 * 1024 * 1024

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'


def _prune_sessions(log_dir: Path, base_name: str):
    """Delete all but the newest LOG_RETENTION - 1 session files"""
    sessions = sorted(log_dir.glob(f"{base_name}_*.log"), reverse=True)  # Newest first
    for old_log in sessions[LOG_RETENTION - 1:]:
        old_log.unlink(missing_ok=True)


def setup_logging(log_file: str = "logs/polystem.log", console_level: int = logging.INFO, file_level: int = logging.DEBUG) -> Path:
    """
    Send logs to the console (brief) and to a per-session file (detailed).

    Each call starts a new timestamped session file next to log_file,
    e.g. logs/polystem_20260101_120000.log, rotated at 10MB. Only the
    newest 5 session files are kept.

    Args:
        log_file: Base path; its stem names the session files
        console_level: Console logging level (INFO = brief)
        file_level: File logging level (DEBUG = verbose)

    Returns:
        Path of the session log file
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _prune_sessions(log_path.parent, log_path.stem)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    file_handler = RotatingFileHandler(session_log, maxBytes=LOG_MAX_BYTES, backupCount=10, encoding='utf-8')
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    # Root captures everything, handlers filter; replace any previous setup
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logging.getLogger("nltk").setLevel(logging.WARNING)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    return session_log
