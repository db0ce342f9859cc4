import matplotlib

matplotlib.use("Agg")

import pytest

from core.output import ListOutput
from schedulers.round_robin import RoundRobinScheduler


@pytest.fixture
def output():
    return ListOutput()


@pytest.fixture
def scheduler(output):
    return RoundRobinScheduler(output)
