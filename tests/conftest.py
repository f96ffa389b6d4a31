import pytest

from contextgraph import ContextGraphApp
from contextgraph.evidence import EvidenceLog
from contextgraph.graph.clock import SessionClock
from contextgraph.graph.store import ContextGraph


class FakeTime:
    """Controllable seconds-since-epoch source, stepped in milliseconds."""

    def __init__(self, start_ms: int = 1_700_000_000_000):
        self.ms = start_ms

    def __call__(self) -> float:
        return self.ms / 1000

    def advance(self, ms: int = 1) -> None:
        self.ms += ms


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def clock(fake_time):
    return SessionClock(fake_time)


@pytest.fixture
def graph(clock):
    return ContextGraph(clock=clock)


@pytest.fixture
def log(graph):
    return EvidenceLog(ids=graph.ids, clock=graph.clock)


@pytest.fixture
def session(fake_time):
    return ContextGraphApp.create(time_source=fake_time, bootstrap=False)
