"""Unit test configuration - isolated environment per test"""

import logging

import pytest

from polystem.stemmers.factory import StemmerFactory


@pytest.fixture(autouse=True)
def clean_stemmer_env(monkeypatch):
    """
    Start every test from the documented defaults.

    Developer .env files or shell exports must not change which
    stemmer the factory builds.
    """
    for name in ("STEMMER_TYPE", "STEMMER_SNOWBALL_LANGUAGE", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_stemmer_factory():
    """Drop cached stemmer instances between tests."""
    StemmerFactory.cleanup()
    yield
    StemmerFactory.cleanup()


@pytest.fixture
def restore_root_logging():
    """
    Restore root logger handlers after setup_logging() replaced them.

    Handlers added by the test are closed so tmp_path files are released.
    """
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    nltk_level = logging.getLogger("nltk").level

    yield root_logger

    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)
    logging.getLogger("nltk").setLevel(nltk_level)
