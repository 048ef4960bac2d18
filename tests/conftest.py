"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_document() -> dict:
    """Nested document exercising every native type."""
    return {
        "name": "probe-7",
        "active": True,
        "error": None,
        "depth": 1500,
        "offset": -40,
        "gain": 0.5,
        "serial": "004211",
        "tags": ["a", "bc", ""],
        "position": {"lat": 42, "lon": -71, "fix": [1, 2, 3]},
    }


@pytest.fixture
def sample_array_bytes() -> bytes:
    """Array of two uint8 values."""
    return b"[U\x01U\x02]"
