"""
Pytest configuration and shared fixtures for all precisionlint tests.

The lint driver is stateless between files (fresh LintContext and pass
instances per lint), so one session-scoped instance is shared by every test;
building it loads the Lark grammar once.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from precisionlint.compiler.driver import LintDriver


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def session_driver():
    """Session-scoped stateless lint driver shared across ALL tests."""
    return LintDriver()


@pytest.fixture(scope="class")
def driver(session_driver):
    """Class-scoped driver - returns the session driver (stateless, safe to share)."""
    return session_driver


@pytest.fixture
def parser(session_driver):
    """The driver's Lark-backed parser."""
    return session_driver.parser


@pytest.fixture
def no_color(monkeypatch):
    """Force plain output for formatter assertions."""
    monkeypatch.setenv("NO_COLOR", "1")


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
