import pytest

from shmup.configs.shmup_config import GAME_CONFIG
from shmup.game import Simulation

FRAME_MS = 16


def make_playing(**overrides) -> Simulation:
    """A simulation that has seen one welcome frame at t=0 and is now playing"""
    sim = Simulation(**{**GAME_CONFIG, **overrides})
    sim.on_frame(0)
    sim.advance_phase()
    return sim


def run_frames(sim: Simulation, n: int, start: float = 0, step: float = FRAME_MS) -> float:
    """Feed n frames after `start`; returns the last timestamp"""
    stamp = start
    for _ in range(n):
        stamp += step
        sim.on_frame(stamp)
    return stamp


class RecordingSurface:
    """Surface that remembers every primitive instead of drawing it"""

    def __init__(self):
        self.calls = []

    def fill_rect(self, color, x, y, w, h):
        self.calls.append(("rect", color, x, y, w, h))

    def draw_text(self, text, x, y, color=(255, 255, 255)):
        self.calls.append(("text", text, x, y))

    @property
    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]

    @property
    def rects(self):
        return [c for c in self.calls if c[0] == "rect"]


@pytest.fixture
def sim():
    return make_playing()


@pytest.fixture
def surface():
    return RecordingSurface()
