import pytest

from fakes import FakeDevice


@pytest.fixture
def gamepad():
    return FakeDevice()
