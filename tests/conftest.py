"""Pytest configuration shared by all test packages.

Provides:
1. A TestClient bound to the real application
2. A helper for building unique coded enum names, since the coded enum
   registry is process-wide and keyed by name
"""

from itertools import count

import pytest
from fastapi.testclient import TestClient

from src.main import app

_enum_counter = count(1)


@pytest.fixture
def client() -> TestClient:
    """TestClient for the application (lifespan not run)."""
    return TestClient(app)


@pytest.fixture
def unique_enum_name():
    """Build a coded enum name no other test has used.

    Usage:
        name = unique_enum_name("Level")  # "Level_1"
    """

    def _make(prefix: str) -> str:
        return f"{prefix}_{next(_enum_counter)}"

    return _make
