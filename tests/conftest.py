"""
Shared fixtures: seeded randomness, zero latency, throwaway storage.
"""

import random
from datetime import datetime, timezone

import pytest

from acronify.config import get_default_config
from acronify.db import Database
from acronify.generator import Generator
from acronify.latency import Latency
from acronify.store import RecordStore


class FixedClock:
    """Clock that advances one minute per call."""

    def __init__(self, start: datetime):
        self.now = start
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.now.replace(minute=self.calls % 60)
        self.calls += 1
        return value


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def generator(rng) -> Generator:
    return Generator(config=get_default_config(), rng=rng, latency=Latency.none())


@pytest.fixture
def db(tmp_path) -> Database:
    return Database(tmp_path / "acronify.db")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def make_store(db, rng, clock):
    """Factory for stores on the test database."""

    def _make(seed=None, storage=db) -> RecordStore:
        return RecordStore(storage, seed=seed, latency=Latency.none(), rng=rng, clock=clock)

    return _make


@pytest.fixture
def empty_store(make_store) -> RecordStore:
    return make_store(seed=[])


@pytest.fixture
def seeded_store(make_store) -> RecordStore:
    return make_store()
