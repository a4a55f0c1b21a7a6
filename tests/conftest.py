"""Pytest configuration and fixtures."""

import logging
import os

import pytest
import structlog

from autorename.config import get_settings
from autorename.normalizer import NormalizationOptions


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test without AUTORENAME_ variables and outside the repository.

    Settings read a ``.env`` from the working directory, so tests run from
    their own temporary directory.
    """
    for name in list(os.environ):
        if name.startswith("AUTORENAME_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


@pytest.fixture
def is_file():
    """Directory predicate treating every path as a plain file."""
    return lambda path: False


@pytest.fixture
def is_dir():
    """Directory predicate treating every path as a directory."""
    return lambda path: True


@pytest.fixture
def default_options():
    """Normalization options with every toggle disabled."""
    return NormalizationOptions()


@pytest.fixture
def all_options():
    """Normalization options with every toggle enabled."""
    return NormalizationOptions(start_with_upper_case=True, remove_brackets=True, remove_starting_number=True)
