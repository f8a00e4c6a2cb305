# topmark:header:start
#
#   project      : TypeSniff
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TypeSniff test suite.

Sets up TRACE logging for every run and isolates tests from each other:
the process-wide registry is reset before and after every test, and the
``TYPESNIFF_LOG_LEVEL`` environment variable is removed.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from typesniff.config import logging
from typesniff.constants import LOG_LEVEL_ENV_VAR
from typesniff.registry import TypeRegistry, get_default_registry


@pytest.fixture(autouse=True)
def silence_typesniff_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def pristine_default_registry() -> Iterator[TypeRegistry]:
    """Reset the process-wide registry around every test.

    Yields:
        TypeRegistry: The (reset) default registry.
    """
    registry = get_default_registry()
    registry.reset()
    yield registry
    registry.reset()


@pytest.fixture
def registry() -> TypeRegistry:
    """Return a private registry built from the built-in tables."""
    return TypeRegistry()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)
