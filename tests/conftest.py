"""Shared test fixtures for tilting glass tests."""
import pytest
from glass.container import make_container
from glass.volume import evaluate
from glass.search import run_bisection
from glass.constants import BASE_AREA_CM, HEIGHT_RATIO


@pytest.fixture(scope="session")
def container():
    """Default glass: base area 3π cm², height 2.5 diameters."""
    return make_container(BASE_AREA_CM, HEIGHT_RATIO)


@pytest.fixture(scope="session")
def upright(container):
    """Evaluation at 0°."""
    return evaluate(container, 0.0)


@pytest.fixture(scope="session")
def tilted_45(container):
    """Evaluation at 45°."""
    return evaluate(container, 45.0)


@pytest.fixture(scope="session")
def flat(container):
    """Evaluation at 90° (sealed glass on its side)."""
    return evaluate(container, 90.0)


@pytest.fixture(scope="session")
def trace(container):
    """40 bisection steps from (0, 90)."""
    return run_bisection(container, 0.0, 90.0, 40)
