import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from graham_hull.config import CFG


@pytest.fixture(autouse=True)
def _fresh_state():
    yield
    plt.close("all")
    CFG.reset()
