"""
Pytest configuration and shared fixtures for ncdrill tests.

Provides interpreter factories and sample drill programs used across the
test suite.
"""

import logging
import os
import sys
from collections.abc import Callable

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from ncdrill.drill import DrillInterpreter

logger = logging.getLogger(__name__)

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


# ============================================================================
# INTERPRETER FIXTURES
# ============================================================================

@pytest.fixture
def interpreter() -> DrillInterpreter:
    """Fresh interpreter with default settings."""
    return DrillInterpreter()


@pytest.fixture
def make_interpreter() -> Callable[..., DrillInterpreter]:
    """
    Factory for interpreters with custom settings.

    Usage:
        interp = make_interpreter(stash_limit=3)
    """
    def _make(**kwargs) -> DrillInterpreter:
        return DrillInterpreter(**kwargs)

    return _make


@pytest.fixture
def feed() -> Callable[[DrillInterpreter, list[str]], DrillInterpreter]:
    """Feed lines to an interpreter without flushing."""
    def _feed(interp: DrillInterpreter, lines: list[str]) -> DrillInterpreter:
        for line in lines:
            interp.process(line)
        return interp

    return _feed


# ============================================================================
# SAMPLE PROGRAMS
# ============================================================================

@pytest.fixture
def kicad_program() -> str:
    with open(os.path.join(FIXTURES_DIR, "kicad.drl")) as f:
        return f.read()


@pytest.fixture
def altium_program() -> str:
    with open(os.path.join(FIXTURES_DIR, "altium.txt")) as f:
        return f.read()


@pytest.fixture
def kicad_path() -> str:
    return os.path.join(FIXTURES_DIR, "kicad.drl")
