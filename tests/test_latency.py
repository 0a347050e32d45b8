"""
Tests that generation and store calls await their artificial delay.
"""

import asyncio
import random

import pytest

from acronify.config import get_default_config
from acronify.errors import NotFoundError, ValidationError
from acronify.generator import Generator
from acronify.latency import Latency
from acronify.store import RecordStore

TEXT = "Achieve great results through consistent daily effort and focus"


class RecordingLatency:
    """Latency stand-in that logs each wait instead of sleeping."""

    def __init__(self):
        self.waits = 0

    async def wait(self, rng):
        self.waits += 1


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def latency():
    return RecordingLatency()


@pytest.fixture
def recording_generator(latency):
    return Generator(get_default_config(), random.Random(7), latency)


@pytest.fixture
def recording_store(db, latency):
    return RecordStore(db, seed=[], latency=latency, rng=random.Random(7))


def test_generate_acronym_waits_once(recording_generator, latency):
    run(recording_generator.generate_acronym(TEXT))
    assert latency.waits == 1


def test_summarize_waits_once(recording_generator, latency):
    run(recording_generator.summarize_text(TEXT + ". " + TEXT + "."))
    assert latency.waits == 1


def test_generator_waits_before_rejecting_input(recording_generator, latency):
    with pytest.raises(ValidationError):
        run(recording_generator.generate_acronym("short"))
    assert latency.waits == 1

    with pytest.raises(ValidationError):
        run(recording_generator.summarize_text("also short"))
    assert latency.waits == 2


def test_each_store_operation_waits_once(recording_store, latency):
    record = run(recording_store.create({"summary": "A digest.", "originalText": TEXT}))
    assert latency.waits == 1

    run(recording_store.get_all())
    assert latency.waits == 2

    run(recording_store.get_by_id(record.id))
    assert latency.waits == 3

    run(recording_store.update(record.id, record))
    assert latency.waits == 4

    run(recording_store.delete(record.id))
    assert latency.waits == 5


def test_failed_lookup_still_waits(recording_store, latency):
    with pytest.raises(NotFoundError):
        run(recording_store.delete(9999))
    assert latency.waits == 1


def test_wait_sleeps_for_the_sampled_delay(monkeypatch):
    slept = []

    async def fake_sleep(delay):
        slept.append(delay)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)

    run(Latency(0.2, 0.5).wait(random.Random(0)))
    run(Latency.none().wait(random.Random(0)))

    assert len(slept) == 2
    assert 0.2 <= slept[0] <= 0.5
    assert slept[1] == 0.0
