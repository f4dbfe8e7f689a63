"""
Heads-up display values: frames per second and score
"""

from __future__ import annotations

import math


class Hud:
    """
    Derives the values shown on top of the playing field.

    The fps value is deliberately coarse: it is recomputed from the last
    frame's duration only every `interval` frames and held in between,
    which keeps the number from flickering.
    """

    def __init__(self, interval: int = 10):
        if interval <= 0:
            raise ValueError(f"fps interval must be positive, got {interval}")
        self.interval = interval
        self.reset()

    def reset(self):
        self.frame_count = 0
        self.fps = 0

    def update(self, delta_ms: float):
        """Account for one playing frame that took `delta_ms` milliseconds"""
        if self.frame_count % self.interval == 0 and delta_ms > 0:
            self.fps = math.ceil(1000.0 / delta_ms)
        self.frame_count += 1

    def fps_text(self) -> str:
        return f"{self.fps} fps"

    @staticmethod
    def score_text(hit_count: int) -> str:
        return f"{hit_count}"
