"""
Pytest configuration for the gowriter test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Stand-in formatter commands built on the running interpreter
"""

import os
import sys

import pytest

from gowriter.logging_config import setup_logging


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Keep formatter logging out of the test output."""
    os.environ.setdefault("GOWRITER_MACHINE_MODE", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


# ============================================================================
# FORMATTER FIXTURES
# ============================================================================

@pytest.fixture
def python_formatter():
    """
    Build a formatter command that runs a Python snippet on the current interpreter.

    Usage:
        def test_something(python_formatter):
            command, *args = python_formatter("import sys; sys.stdout.write(sys.stdin.read().upper())")
    """
    def build(script: str):
        return [sys.executable, "-c", script]

    return build
