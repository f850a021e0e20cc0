"""
Pytest configuration and fixtures for the ddd toolkit tests.

This module provides:
- Environment isolation for Settings
"""

import os

import pytest


# ============================================================================
# Environment Fixtures
# ============================================================================
@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """
    Remove DDD_* variables so Settings only sees what a test sets.
    """
    for name in list(os.environ):
        if name.upper().startswith("DDD_"):
            monkeypatch.delenv(name, raising=False)
    yield
