# conftest.py
import pytest

from config import TMDBConfig


class FakeTimer:
    """Substitui threading.Timer: só dispara quando o teste manda."""

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if self.started and not self.cancelled:
            self.function()


class TimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, function):
        timer = FakeTimer(interval, function)
        self.timers.append(timer)
        return timer

    @property
    def last(self):
        return self.timers[-1]


@pytest.fixture
def timers():
    return TimerFactory()


@pytest.fixture
def config():
    return TMDBConfig(api_key="test-token")
