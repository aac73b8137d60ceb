from __future__ import annotations

import pytest

from wavescope.core.clock_gate import ClockGate
from wavescope.core.errors import SamplingFailed, SourceCountMismatch
from wavescope.core.sampler import Sampler
from wavescope.core.series_registry import SeriesRegistry
from wavescope.sources.base import CallableSource


class ScriptedSource:
    """Return queued batches in order; exceptions in the queue are raised."""

    def __init__(self, *batches) -> None:
        self._batches = list(batches)
        self.calls = 0

    def sample_all(self):
        self.calls += 1
        item = self._batches.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _make(source, *, capacity: int = 3, interval: float = 0.010) -> Sampler:
    return Sampler(source, SeriesRegistry(capacity), ClockGate(interval))


def test_first_tick_samples_immediately() -> None:
    sampler = _make(ScriptedSource([1.0, 2.0]))
    assert sampler.on_tick(0.0) is True
    assert sampler.index == 1
    assert sampler.series_count == 2
    assert sampler.registry.view(0) == ((1, 1.0),)
    assert sampler.registry.view(1) == ((1, 2.0),)
    assert sampler.gate.last_sample_at == 0.0


def test_ticks_before_interval_are_no_ops() -> None:
    source = ScriptedSource([1.0], [2.0])
    sampler = _make(source)
    sampler.on_tick(0.0)

    assert sampler.on_tick(0.004) is False
    assert sampler.on_tick(0.010) is False
    assert source.calls == 1
    assert sampler.index == 1

    assert sampler.on_tick(0.011) is True
    assert source.calls == 2
    assert sampler.registry.view(0) == ((2, 2.0), (1, 1.0))


def test_batch_shares_one_index_per_tick() -> None:
    source = CallableSource(lambda: [0.5, 1.5, 2.5])
    sampler = _make(source, capacity=4, interval=0.0)
    for tick in range(1, 7):
        assert sampler.on_tick(tick * 0.001)
        fronts = [sampler.registry.view(p)[0].index for p in range(3)]
        assert fronts == [tick, tick, tick]
    assert all(len(sampler.registry.view(p)) == 4 for p in range(3))


def test_source_exception_leaves_state_untouched() -> None:
    source = ScriptedSource([1.0, 2.0], OSError("sensor unplugged"), [3.0, 4.0])
    sampler = _make(source)
    sampler.on_tick(0.0)
    versions = sampler.registry.versions()

    with pytest.raises(SamplingFailed) as excinfo:
        sampler.on_tick(1.0)

    assert isinstance(excinfo.value.__cause__, OSError)
    assert sampler.gate.last_sample_at == 0.0
    assert sampler.index == 1
    assert sampler.registry.versions() == versions
    assert sampler.registry.view(0) == ((1, 1.0),)

    # The retry gets the next index, with no gap left by the failed tick.
    assert sampler.on_tick(1.0) is True
    assert sampler.index == 2
    assert sampler.registry.view(0) == ((2, 3.0), (1, 1.0))
    assert sampler.registry.view(1) == ((2, 4.0), (1, 2.0))


@pytest.mark.parametrize("bad_value", [None, "n/a", True, object()])
def test_unusable_value_fails_whole_batch(bad_value) -> None:
    source = ScriptedSource([1.0, 2.0, 3.0], [4.0, bad_value, 6.0])
    sampler = _make(source)
    sampler.on_tick(0.0)

    with pytest.raises(SamplingFailed):
        sampler.on_tick(1.0)

    for position, value in enumerate([1.0, 2.0, 3.0]):
        assert sampler.registry.view(position) == ((1, value),)
    assert sampler.gate.last_sample_at == 0.0


def test_failure_on_first_tick_keeps_registry_uninitialized() -> None:
    source = ScriptedSource(RuntimeError("boom"), [7.0])
    sampler = _make(source, interval=60.0)

    with pytest.raises(SamplingFailed):
        sampler.on_tick(0.0)
    assert not sampler.registry.is_initialized()
    assert sampler.gate.last_sample_at is None

    # Never sampled, so the retry is due immediately.
    assert sampler.on_tick(0.001) is True
    assert sampler.registry.view(0) == ((1, 7.0),)


def test_empty_first_batch_is_a_sampling_failure() -> None:
    sampler = _make(ScriptedSource([]))
    with pytest.raises(SamplingFailed):
        sampler.on_tick(0.0)
    assert not sampler.registry.is_initialized()


def test_source_count_change_propagates_without_mutation() -> None:
    source = ScriptedSource([1.0, 2.0, 3.0], [1.0, 2.0])
    sampler = _make(source)
    sampler.on_tick(0.0)

    with pytest.raises(SourceCountMismatch):
        sampler.on_tick(1.0)

    assert sampler.index == 1
    assert sampler.gate.last_sample_at == 0.0
    assert sampler.series_count == 3


def test_ints_are_accepted_as_values() -> None:
    sampler = _make(ScriptedSource([1, -3]))
    sampler.on_tick(0.0)
    assert sampler.registry.view(0) == ((1, 1.0),)
    assert sampler.registry.view(1) == ((1, -3.0),)


@pytest.mark.parametrize("text_value", ["2.5", b"2.5"])
def test_numeric_text_fails_the_batch(text_value) -> None:
    sampler = _make(ScriptedSource([1.0, text_value]))
    with pytest.raises(SamplingFailed):
        sampler.on_tick(0.0)
    assert not sampler.registry.is_initialized()
    assert sampler.gate.last_sample_at is None
    assert sampler.index == 0
