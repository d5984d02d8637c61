import pytest

from graph_model import GraphModel
from tests.helpers import RecordingSurface


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def loop_model():
    # 0 -> 1 and a self-loop on 1; node 2 untouched
    return GraphModel([
        [False, True, False],
        [False, True, False],
        [False, False, False],
    ])
