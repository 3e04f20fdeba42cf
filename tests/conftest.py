"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.fixtures.test_inputs import (
    get_test_project,
    get_construction_cost_lines,
    get_construction_only_inputs,
    get_stabilized_inputs,
)


@pytest.fixture
def project():
    """Get the project record."""
    return get_test_project()


@pytest.fixture
def cost_lines():
    """Get the $400K estimate."""
    return get_construction_cost_lines()


@pytest.fixture
def construction_inputs():
    """Get construction-only inputs (no rental, no debt)."""
    return get_construction_only_inputs()


@pytest.fixture
def stabilized_inputs():
    """Get build-then-rent inputs with operating expenses and debt."""
    return get_stabilized_inputs()
