"""Shared pytest fixtures for button event tests."""

import logging

import pytest

from button_events import ButtonEventConfig, InputEventMachine
from utils import HybridLogger


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start_ms: int = 0):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> int:
        self.now_ms += ms
        return self.now_ms


def _hold(machine: InputEventMachine, level: bool, start_ms: int, end_ms: int):
    """Tick once per ms over [start_ms, end_ms) and return {time: events} for ticks with events."""
    fired = {}
    for now in range(start_ms, end_ms):
        machine.tick(now, level)
        if machine.events.any_event:
            fired[now] = machine.events
    return fired


@pytest.fixture
def hold():
    """hold(machine, level, start_ms, end_ms) -> {time: events}"""
    return _hold


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def machine() -> InputEventMachine:
    """Machine with the default timings."""
    return InputEventMachine(ButtonEventConfig(label="OK"))


@pytest.fixture
def hybrid_logger():
    """Console-less HybridLogger; records still propagate to caplog."""
    main_logger = HybridLogger("button_events_test", log_dir=None, console=False)
    yield main_logger
    main_logger.cleanup()


@pytest.fixture
def class_logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)
