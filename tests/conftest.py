"""Shared test fixtures for the thumborurl test suite."""

from __future__ import annotations

import pytest

from thumborurl import Thumbor


@pytest.fixture
def unsafe() -> Thumbor:
    """Root-relative service without a key."""
    return Thumbor("/")


@pytest.fixture
def safe() -> Thumbor:
    """Root-relative service signing with the key ``"test"``."""
    return Thumbor("/", key="test")
