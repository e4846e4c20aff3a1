import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from cyclegraph import CycleGraph

SMALL_SIZES = list(range(0, 9))
DTYPES = [int, np.int8, np.int32, np.uint8, np.uint64]


@pytest.fixture
def ring5():
    return CycleGraph(5)


@pytest.fixture(params=SMALL_SIZES)
def small_graph(request):
    return CycleGraph(request.param)
