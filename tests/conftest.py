"""Shared fixtures for traitkit tests."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from traitkit.config import get_trait_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop TRAITKIT_* variables and the cached settings around every test."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("TRAITKIT_")}
    for key in saved:
        del os.environ[key]
    get_trait_settings.cache_clear()
    yield
    get_trait_settings.cache_clear()
    for key in [k for k in os.environ if k.startswith("TRAITKIT_")]:
        del os.environ[key]
    os.environ.update(saved)