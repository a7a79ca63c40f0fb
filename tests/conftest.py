"""Pytest configuration and fixtures."""

import itertools

import pytest


class CallCounter:
    """Zero-argument computation that counts its calls.

    Returns ``value`` if given, otherwise the 1-based call number. Raises
    ``fail_with`` on call number ``fail_on``.
    """

    def __init__(self, value=None, fail_on=None, fail_with=None):
        self.calls = 0
        self.value = value
        self.fail_on = fail_on
        self.fail_with = fail_with or RuntimeError("boom")

    def __call__(self):
        self.calls += 1
        if self.fail_on is not None and self.calls == self.fail_on:
            raise self.fail_with
        return self.calls if self.value is None else self.value


def make_step_clock(step_seconds=1.0):
    """Clock advancing by a fixed step on every read (each timed call lasts one step)."""
    counter = itertools.count()
    return lambda: next(counter) * step_seconds


def make_sequence_clock(durations_seconds):
    """Clock whose consecutive start/stop pairs are ``durations_seconds`` apart."""
    readings = []
    now = 0.0
    for d in durations_seconds:
        readings.extend([now, now + d])
        now += d
    it = iter(readings)
    return lambda: next(it)


@pytest.fixture
def step_clock():
    """Clock giving every timed call exactly 1000.0 ms."""
    return make_step_clock(1.0)


@pytest.fixture
def counter():
    """Computation returning its call number."""
    return CallCounter()


@pytest.fixture
def constant_computation():
    """Computation always returning 42."""
    return CallCounter(value=42)


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory as a string path."""
    return str(tmp_path)


@pytest.fixture
def make_counter():
    """Factory for CallCounter computations."""
    return CallCounter


@pytest.fixture
def sequence_clock():
    """Factory for clocks with explicit per-call durations (seconds)."""
    return make_sequence_clock
