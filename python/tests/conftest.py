"""
Pytest configuration and fixtures for Numerus tests.
"""

import logging
import os
import tempfile

import pytest

# Importing numerus.server configures file logging; keep it out of the repo
os.environ.setdefault("NUMERUS_LOG_DIR", tempfile.mkdtemp(prefix="numerus_test_logs_"))


@pytest.fixture
def inflector():
    """The shared default Inflector."""
    from numerus.inflection import get_inflector

    return get_inflector()


@pytest.fixture
def make_inflector():
    """Build a custom Inflector (default tables unless overridden)."""
    from numerus.inflection import Inflector

    def _make(**kwargs):
        return Inflector(**kwargs)

    return _make


@pytest.fixture
def auth_schema():
    """Typical auth schema: logical key → declared model name."""
    return {
        "user": "user",
        "session": "session",
        "account": "account",
        "verification": "verification",
    }


@pytest.fixture
def clean_numerus_logger():
    """
    Detach handlers added during a test from the "numerus" logger.

    setup_logging() is idempotent per process, so tests that exercise it need
    a logger without handlers and must not leak theirs.
    """
    logger = logging.getLogger("numerus")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers = []

    yield logger

    for handler in logger.handlers:
        handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
