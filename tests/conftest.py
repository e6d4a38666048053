import pytest

from closed_intervals.timezone_utils import set_timezone


@pytest.fixture(autouse=True)
def utc_timezone():
    """Table loading changes the module timezone; start every test from UTC."""
    set_timezone("UTC")
    yield
    set_timezone("UTC")


