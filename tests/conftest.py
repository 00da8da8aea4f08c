import random

import pytest

from paddle_shooter.loop import GameLoop
from paddle_shooter.scheduler import Scheduler
from paddle_shooter.world import World

WIDTH = 800
HEIGHT = 600


class ManualClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now

    def advance(self, milliseconds):
        self.now += milliseconds


class RecordingSurface:
    """Render surface that keeps every call instead of drawing."""

    def __init__(self):
        self.calls = []

    def clear_rect(self, rect, color):
        self.calls.append(("clear_rect", rect))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("fill_rect", x, y, width, height))

    def fill_text(self, text, x, y, font, color):
        self.calls.append(("fill_text", text, x, y))

    def measure_text_width(self, text, font):
        return len(text) * 10

    def texts(self):
        return [call[1] for call in self.calls if call[0] == "fill_text"]

    def rects(self):
        return [call[1:] for call in self.calls if call[0] == "fill_rect"]

    def reset(self):
        self.calls.clear()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock)


@pytest.fixture
def world(scheduler):
    return World(WIDTH, HEIGHT, scheduler, rng=random.Random(1234))


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def loop(world, surface, scheduler):
    return GameLoop(world, surface, scheduler)


@pytest.fixture
def advance(clock, scheduler):
    """Move the clock forward and fire the timers that came due."""

    def run(milliseconds):
        clock.advance(milliseconds)
        return scheduler.run_due_timers()

    return run
