"""
Arcade backend: window, frame scheduling and keyboard/mouse input
"""

from __future__ import annotations

import logging
from typing import Optional

import arcade

from ..configs.shmup_config import COLORS, WINDOW_CONFIG
from .render import draw_frame
from .simulation import Simulation

logger = logging.getLogger(__name__)

# maps keys to the respective commands
KEYMAP = {
    arcade.key.W: "up",
    arcade.key.A: "left",
    arcade.key.S: "down",
    arcade.key.D: "right",
    arcade.key.UP: "up",
    arcade.key.LEFT: "left",
    arcade.key.DOWN: "down",
    arcade.key.RIGHT: "right",
    arcade.key.ENTER: "fire",
    arcade.key.RETURN: "fire",
    arcade.key.SPACE: "fire",
}


class ArcadeSurface:
    """Draws top-left based rectangles and text on arcade's bottom-left canvas"""

    def __init__(self, height: int, font_size: int = 16, font_name=WINDOW_CONFIG["font_name"]):
        self.height = height
        self.font_size = font_size
        self.font_name = font_name

    def fill_rect(self, color, x, y, w, h):
        top = self.height - y
        arcade.draw_lrbt_rectangle_filled(x, x + w, top - h, top, color)

    def draw_text(self, text, x, y, color=COLORS["text"]):
        # y is the text baseline, like on a html canvas
        arcade.draw_text(
            text, x, self.height - y, color, self.font_size,
            font_name=self.font_name, anchor_y="baseline",
        )


class ShmupWindow(arcade.Window):
    """Arcade window running the simulation once per display refresh"""

    def __init__(self, sim: Simulation, title: str = WINDOW_CONFIG["title"],
                 update_rate: float = WINDOW_CONFIG["update_rate"],
                 font_size: int = WINDOW_CONFIG["font_size"]):
        super().__init__(sim.width, sim.height, title, update_rate=update_rate)
        self.sim = sim
        self.surface = ArcadeSurface(sim.height, font_size)
        self._stamp = 0.0  # ms since the window opened
        logger.info("Opened %dx%d window", sim.width, sim.height)

    def on_update(self, delta_time: float):
        self._stamp += delta_time * 1000.0
        self.sim.on_frame(self._stamp)

    def on_draw(self):
        self.clear()
        draw_frame(self.sim, self.surface)

    def on_key_press(self, symbol: int, modifiers: int):
        command = KEYMAP.get(symbol)
        if command is not None:
            self.sim.key_down(command)

    def on_key_release(self, symbol: int, modifiers: int):
        command = KEYMAP.get(symbol)
        if command is not None:
            self.sim.key_up(command)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        self.sim.advance_phase()


def run_window(sim: Optional[Simulation] = None, **window_kwargs):
    """Open the game window and block until it is closed"""
    window = ShmupWindow(sim or Simulation(), **window_kwargs)
    arcade.run()
    return window
