"""
Parallax background
-------------------
Two layers of square tiles scroll downwards at different speeds to give the
illusion of forward movement. The player position nudges each layer a
little, the upper layer more than the lower one, which adds depth.

Nothing here affects gameplay; the layers only produce rectangles to paint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass
class BackgroundLayer:
    """One layer of background tiles"""
    name: str
    shift_x: float
    speed: float
    tile_size: int
    color: Tuple[int, int, int]
    parallax_x: float
    parallax_y: float
    shift_y: float = 0.0

    @property
    def spacing(self) -> int:
        # distance from one tile corner to the next
        return self.tile_size * 2

    def advance(self):
        """Move the tiles down and wrap once a full tile spacing is covered"""
        self.shift_y = (self.shift_y + self.speed) % self.spacing

    def reset(self):
        self.shift_y = 0.0

    def tiles(self, width: float, height: float,
              player_x: float, player_y: float) -> Iterator[Tuple[float, float]]:
        """Yield the top-left corner of every tile visible in the arena"""
        spacing = self.spacing

        # start one spacing north of the screen so tiles come in from the top
        y = self.shift_y - spacing - player_y * self.parallax_y
        while y < height:
            x = self.shift_x - player_x * self.parallax_x
            while x < width:
                yield x, y
                x += spacing
            y += spacing


def build_layers(configs) -> list:
    """Create background layers from a list of config dicts"""
    return [BackgroundLayer(**cfg) for cfg in configs]
