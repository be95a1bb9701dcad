"""Shared fixtures."""

import logging

import pytest

from scalebalancer.shared.config import get_settings


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run each test away from any local config file, with fresh settings and logging."""
    monkeypatch.chdir(tmp_path)
    for name in ("SCALEBALANCER_PARSING__NUMERIC_POLICY", "SCALEBALANCER_BALANCING__ORDER",
                 "SCALEBALANCER_REPORTING__FORMAT", "SCALEBALANCER_LOGGING__LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    
    yield
    
    get_settings.cache_clear()
    logger = logging.getLogger("scalebalancer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
