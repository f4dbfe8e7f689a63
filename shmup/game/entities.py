"""
Game entity dataclasses
"""

from dataclasses import dataclass


@dataclass
class Player:
    """Player ship. Its size doubles as the remaining health."""
    x: float
    y: float
    vx: int = 0
    vy: int = 0
    ax: int = 0  # -1, 0 or 1, set by held direction keys
    ay: int = 0
    size: int = 20
    firing: bool = False
    last_shot: float = 0.0  # playing-clock ms

    @property
    def alive(self) -> bool:
        return self.size > 0


@dataclass
class Bullet:
    """Projectile fired by the player (moves up) or an enemy (moves down)"""
    x: float
    y: float
    vy: float
    alive: bool = True


@dataclass
class Enemy:
    """Side-scrolling enemy. Size (and hit radius) shrinks with its hitpoints."""
    x: float
    y: float
    from_left: bool
    hp: int
    alive: bool = True

    def size(self, multiplier: int) -> int:
        return self.hp * multiplier
