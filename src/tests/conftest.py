import pytest

from persian_calendar.zones import AFGHANISTAN, IRAN, UTC


def pytest_addoption(parser):
    parser.addoption(
        "--roundtrip-step",
        action="store",
        type=int,
        default=1,
        help="Day stride for the exhaustive calendar round trips (default: 1, every day)",
    )


@pytest.fixture(scope="session")
def roundtrip_step(request):
    """Stride used by the slow range sweeps; raise it for a quicker local run."""
    return max(1, request.config.getoption("--roundtrip-step"))


@pytest.fixture
def tehran():
    return IRAN


@pytest.fixture
def kabul():
    return AFGHANISTAN


@pytest.fixture
def utc():
    return UTC
