"""Shared pytest setup: make the top-level modules importable from a checkout."""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def single_input_function():
    """f(x1) = !x1: only row 0 is true."""
    return (True, False)
