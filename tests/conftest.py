# Area: Shared Tests
"""Shared fixtures: isolate HEXWIRE_* env vars and the package logger."""

import logging

import pytest

from hexwire.config import ENV_MAPPINGS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_MAPPINGS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_hexwire_logger():
    yield
    pkg_logger = logging.getLogger("hexwire")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True
