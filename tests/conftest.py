import pytest

from tests.helpers import make_empty_sim


@pytest.fixture
def empty_sim():
    return make_empty_sim()
