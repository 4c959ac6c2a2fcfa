"""Shared fixtures for the recipe browser tests."""

import pytest


class FakeTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True


class FakeClock:
    """Collects FakeTimers and fires the live ones on demand."""

    def __init__(self):
        self.timers = []

    def __call__(self, interval, function):
        timer = FakeTimer(interval, function)
        self.timers.append(timer)
        return timer

    @property
    def live(self):
        return [timer for timer in self.timers if timer.started and not timer.cancelled]

    def fire_all(self):
        for timer in self.live:
            timer.function()


@pytest.fixture
def clock():
    return FakeClock()
