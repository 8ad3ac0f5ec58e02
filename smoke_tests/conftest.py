"""Pytest configuration and fixtures for smoke tests.

Smoke tests verify basic package health:
- Every module imports
- Type checking passes
"""

from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_DIR = PROJECT_ROOT / "src" / "rabbit_topology"


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def package_dir() -> Path:
    """Return the rabbit_topology package directory path."""
    return PACKAGE_DIR

