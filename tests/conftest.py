"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator session."""
    from calccore import Calculator

    return Calculator()


@pytest.fixture
def press():
    """Provide a helper that presses keys from the initial state and returns the result."""
    from calccore import INITIAL_STATE, press_key

    def _press(*keys: str):
        state = INITIAL_STATE
        for key in keys:
            state = press_key(state, key)
        return state

    return _press

