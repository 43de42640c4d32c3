import pytest

from e2e_utils.config import configure_logging

from .fakes import FakeClock, FakePage


@pytest.fixture(scope="session", autouse=True)
def logging_setup():
    configure_logging("DEBUG")


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def broken_page():
    return FakePage(fail=True)
