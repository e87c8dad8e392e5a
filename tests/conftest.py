"""Shared test fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Restore structlog's global configuration after each test."""
    yield
    structlog.reset_defaults()
