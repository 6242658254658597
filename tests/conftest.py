import random

import pytest

from ashbird.data_models import GamePhase
from ashbird.engine import SimulationEngine


class RecordingStore:
    """In-memory store that remembers every write."""

    def __init__(self, initial=None):
        self.value = initial
        self.writes = []

    def get(self):
        return self.value

    def set(self, value):
        self.writes.append(value)
        self.value = value
        return True


class FailingStore:
    """Store whose writes always fail, optionally by raising."""

    def __init__(self, initial=None, raise_on_set=False, raise_on_get=False):
        self.value = initial
        self.attempts = []
        self.raise_on_set = raise_on_set
        self.raise_on_get = raise_on_get

    def get(self):
        if self.raise_on_get:
            raise OSError("disk on fire")
        return self.value

    def set(self, value):
        self.attempts.append(value)
        if self.raise_on_set:
            raise OSError("disk full")
        return False


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def engine(store, rng):
    return SimulationEngine(store=store, width=400, height=600, rng=rng)


@pytest.fixture
def active_engine(engine):
    engine.on_primary_input()
    engine.on_primary_input()
    assert engine.phase is GamePhase.ACTIVE
    return engine
