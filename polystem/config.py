"""
Environment-driven configuration.

Variables (optionally loaded from .env.local or .env):
    STEMMER_TYPE: "porter" | "s" | "snowball" (default: porter)
    STEMMER_SNOWBALL_LANGUAGE: Snowball language (default: english)
    LOG_LEVEL: Console log level (default: INFO)
    LOG_FILE: Base log file path; logging is configured only when set
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from .logging_config import setup_logging

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_STEMMER_TYPE = "porter"
DEFAULT_SNOWBALL_LANGUAGE = "english"
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Snapshot of the environment at the time get_settings() was called"""
    stemmer_type: str = DEFAULT_STEMMER_TYPE
    snowball_language: str = DEFAULT_SNOWBALL_LANGUAGE
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @property
    def console_level(self) -> int:
        """
        Numeric console level for LOG_LEVEL.

        Raises:
            ValueError: If LOG_LEVEL is not a known level name
        """
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown LOG_LEVEL: {self.log_level}. "
                f"Valid options: {', '.join(LOG_LEVELS)}"
            )
        return getattr(logging, self.log_level)


def load_environment(base_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Load environment variables from .env.local (local dev) or .env.

    .env.local takes priority; values override the process environment.

    Args:
        base_dir: Directory holding the env files (default: project root)

    Returns:
        Path of the loaded file, or None if neither exists
    """
    base = Path(base_dir) if base_dir is not None else PROJECT_ROOT
    env_local = base / ".env.local"
    env_file = base / ".env"

    if env_local.exists():
        logger.info(f"Loading environment from: {env_local}")
        load_dotenv(env_local, override=True)
        return env_local
    if env_file.exists():
        logger.info(f"Loading environment from: {env_file}")
        load_dotenv(env_file, override=True)
        return env_file

    logger.debug("No .env.local or .env file found - using system environment variables only")
    return None


def get_settings() -> Settings:
    """
    Read settings from the current environment.

    Values are not validated here; LOG_LEVEL is checked by
    Settings.console_level, stemmer options by the factory.
    """
    return Settings(
        stemmer_type=os.getenv("STEMMER_TYPE", DEFAULT_STEMMER_TYPE).strip().lower() or DEFAULT_STEMMER_TYPE,
        snowball_language=os.getenv("STEMMER_SNOWBALL_LANGUAGE", DEFAULT_SNOWBALL_LANGUAGE).strip().lower(),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper(),
        log_file=os.getenv("LOG_FILE") or None,
    )


def init_from_environment(base_dir: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load env files, read settings and configure logging.

    Logging is set up (console + rotating file) only when LOG_FILE is
    defined, so library users that configure logging themselves are
    left alone.

    Args:
        base_dir: Directory holding the env files (default: project root)

    Returns:
        Effective settings
    """
    load_environment(base_dir)
    settings = get_settings()
    console_level = settings.console_level

    if settings.log_file:
        setup_logging(
            log_file=settings.log_file,
            console_level=console_level,
            file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
        )

    logger.info(f"polystem configured: stemmer={settings.stemmer_type}, log_level={settings.log_level}")
    return settings
