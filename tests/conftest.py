"""Shared pytest fixtures for bounded tests."""

from __future__ import annotations

import pytest

from bounded import BoundedValue, between


@pytest.fixture
def signed_range() -> BoundedValue[int]:
    """Provide an integer bounded value spanning [-43, 42]."""
    return between(-43, 42)


@pytest.fixture
def unit_interval() -> BoundedValue[float]:
    """Provide a float bounded value spanning [0.0, 1.0]."""
    return between(0.0, 1.0)


@pytest.fixture
def single_point() -> BoundedValue[int]:
    """Provide a degenerate bounded value with min == max."""
    return between(7, 7)
