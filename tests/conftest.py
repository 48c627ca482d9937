# tests/conftest.py
"""
Pytest configuration and shared fixtures for all tests
Puts the project root on the import path and provides seeded random sources
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Calculate project root and add to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

TEST_SEED = 20240917


def get_project_root():
    """Get project root directory for path calculations"""
    return PROJECT_ROOT


@pytest.fixture
def rng():
    """Seeded generator so every scenario draws the same sequence"""
    return np.random.default_rng(TEST_SEED)
