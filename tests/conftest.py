"""
Shared pytest fixtures for LongSim tests.
"""

import contextlib
import io

import pytest

from tests.config import SCENARIO


@pytest.fixture
def suppress_output():
    """Silence configuration echoes printed to stdout."""
    with contextlib.redirect_stdout(io.StringIO()):
        yield


@pytest.fixture
def scenario_params():
    """Keyword arguments of the reference tutorial scenario."""
    return dict(SCENARIO)


@pytest.fixture
def scenario_dataset(scenario_params):
    """Dataset generated from the reference scenario."""
    from longsim import generate

    return generate(**scenario_params)


@pytest.fixture
def quiet_model(suppress_output):
    """Default LongitudinalModel with a fixed seed."""
    from longsim import LongitudinalModel

    model = LongitudinalModel()
    model.set_seed(42)
    return model
