# tests/conftest.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Propsat tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common formula fixtures
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages are importable before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def basic_formula():
    """Provide a basic formula.

    Returns:
        str: Two literals joined by AND
    """
    return "A /\\ B"


@pytest.fixture
def complex_formula():
    """Provide a formula exercising every connective, negation and nesting.

    Returns:
        str: Complex formula
    """
    return (
        "(Chicken /\\ (~Tiger -> cat) <-> Snake \\/ Dog -> ~Cat /\\ "
        "(Snake <-> Duck)) \\/ ~Monkey"
    )
