"""
Drawing of the game on any 2D surface

Coordinates are screen coordinates: origin top-left, y grows downwards.
A surface only needs two primitives, `fill_rect` and `draw_text`.
"""

from __future__ import annotations

from typing import Protocol, Tuple

from ..configs.shmup_config import COLORS, BULLET_SIZE
from .phases import Phase
from .simulation import Simulation

Color = Tuple[int, int, int]


class Surface(Protocol):
    def fill_rect(self, color: Color, x: float, y: float, w: float, h: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float, color: Color = COLORS["text"]) -> None: ...


def draw_frame(sim: Simulation, surface: Surface):
    """Paint the screen belonging to the current phase"""
    # simply paints a black rectangle all over the surface
    surface.fill_rect(COLORS["clear"], 0, 0, sim.width, sim.height)

    if sim.phase is Phase.WELCOME:
        draw_welcome(sim, surface)
    elif sim.phase is Phase.GAME_OVER:
        draw_game_over(sim, surface)
    else:
        draw_arena(sim, surface)
        draw_hud(sim, surface)
        if sim.phase is Phase.PAUSED:
            surface.draw_text("paused", sim.center_x, sim.center_y)


def draw_welcome(sim: Simulation, surface: Surface):
    surface.draw_text("Freddy vs JSON", sim.center_x, sim.center_y)
    surface.draw_text("click to start", sim.center_x, sim.center_y + 20)


def draw_game_over(sim: Simulation, surface: Surface):
    surface.draw_text("Congratulations! You died!", 10, sim.center_y - 8)
    surface.draw_text(f"(and took {sim.hit_count} enemies with you)", 10, sim.center_y + 8)


def draw_arena(sim: Simulation, surface: Surface):
    p = sim.player
    for layer in sim.layers:
        for x, y in layer.tiles(sim.width, sim.height, p.x, p.y):
            surface.fill_rect(layer.color, x, y, layer.tile_size, layer.tile_size)

    # a little gray box a.k.a. the player
    half = p.size / 2.0
    surface.fill_rect(COLORS["player"], p.x - half, p.y - half, p.size, p.size)

    for b in sim.player_bullets:
        surface.fill_rect(COLORS["player_bullet"], b.x, b.y, BULLET_SIZE, BULLET_SIZE)

    for e in sim.enemies:
        size = e.size(sim.enemy_size_multiplier)
        surface.fill_rect(COLORS["enemy"], e.x, e.y, size, size)

    for b in sim.enemy_bullets:
        surface.fill_rect(COLORS["enemy_bullet"], b.x, b.y, BULLET_SIZE, BULLET_SIZE)


def draw_hud(sim: Simulation, surface: Surface):
    surface.draw_text(sim.fps_text(), 10, 20)
    surface.draw_text(sim.score_text(), sim.width - 40, 20)
