"""
Simulation - the per-frame engine of the shoot-em-up
----------------------------------------------------
- A ship moves with momentum inside a bounded arena and fires upwards
- Enemies enter from alternating sides, sweep left and right and fire
  downwards in lockstep
- Bullets hit everything whose box overlaps them; dead entities are
  tombstoned and compacted once per frame
- A four-phase state machine (welcome/playing/paused/game-over) decides
  whether the simulation runs at all

The simulation is driven by `on_frame(timestamp)` from any frame scheduler
and knows nothing about drawing or keyboards. Physics is frame-rate coupled:
velocities are pixels per frame, so the game speed follows the display
refresh rate.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..configs.shmup_config import BACKGROUND_CONFIG
from .background import build_layers
from .entities import Player, Bullet, Enemy
from .hud import Hud
from .phases import Phase, next_phase, COMMANDS
from .utils import box_collide, in_bounds, step_velocity

logger = logging.getLogger(__name__)


class Simulation:
    """Frame-driven game state, advanced one phase handler per frame"""

    def __init__(
        self,
        width: int = 960,
        height: int = 540,
        player_size: int = 20,
        player_max_velocity: int = 7,
        player_bullet_velocity: float = 10,
        player_reload_time: float = 100,  # ms
        player_hit_damage: int = 2,
        enemy_insertion_interval: float = 1000,  # ms
        max_enemies: int = 4,
        enemy_velocity: float = 5,
        enemy_strength: int = 4,
        enemy_size_multiplier: int = 5,
        enemy_spawn_y: float = 50,
        enemy_bullet_velocity: float = 10,
        enemy_reload_time: float = 100,  # ms
        fps_interval: int = 10,
        background: Optional[List[dict]] = None,
    ):
        for name, value in (
            ("width", width),
            ("height", height),
            ("player_size", player_size),
            ("player_max_velocity", player_max_velocity),
            ("player_bullet_velocity", player_bullet_velocity),
            ("player_hit_damage", player_hit_damage),
            ("enemy_velocity", enemy_velocity),
            ("enemy_strength", enemy_strength),
            ("enemy_size_multiplier", enemy_size_multiplier),
            ("enemy_bullet_velocity", enemy_bullet_velocity),
        ):
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        for name, value in (
            ("max_enemies", max_enemies),
            ("player_reload_time", player_reload_time),
            ("enemy_insertion_interval", enemy_insertion_interval),
            ("enemy_reload_time", enemy_reload_time),
        ):
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

        # Arena
        self.width = width
        self.height = height
        self.center_x = width / 2.0
        self.center_y = height / 2.0

        # Gameplay config
        self.player_size = player_size
        self.player_max_velocity = player_max_velocity
        self.player_bullet_velocity = player_bullet_velocity
        self.player_reload_time = player_reload_time
        self.player_hit_damage = player_hit_damage
        self.enemy_insertion_interval = enemy_insertion_interval
        self.max_enemies = max_enemies
        self.enemy_velocity = enemy_velocity
        self.enemy_strength = enemy_strength
        self.enemy_size_multiplier = enemy_size_multiplier
        self.enemy_spawn_y = enemy_spawn_y
        self.enemy_bullet_velocity = enemy_bullet_velocity
        self.enemy_reload_time = enemy_reload_time

        self.hud = Hud(fps_interval)
        self.layers = build_layers(BACKGROUND_CONFIG if background is None else background)

        self.phase = Phase.WELCOME
        # last timestamp seen from the scheduler, in any phase
        self._last_stamp: Optional[float] = None

        # World state
        self.player: Player = None  # type: ignore
        self.player_bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []
        self.enemy_bullets: List[Bullet] = []

        # Event counters of the last playing frame
        self.events: Dict[str, int] = {}

        self.reset()

    # ----------------------------
    # Session state
    # ----------------------------

    def reset(self):
        """Put every piece of session state back to its initial value"""
        self.clock = 0.0  # ms spent in the playing phase
        self.hit_count = 0
        self.last_enemy_insertion = 0.0
        self.last_enemy_shot = 0.0
        self.enemies = []
        self.enemy_bullets = []
        self.events = {"kills": 0, "damage": 0}
        self.hud.reset()
        for layer in self.layers:
            layer.reset()
        self.init_player()

    def init_player(self):
        half = self.player_size / 2.0
        self.player = Player(
            x=self.center_x - half,
            y=self.center_y - half,
            size=self.player_size,
        )
        self.player_bullets = []

    # ----------------------------
    # Input
    # ----------------------------

    def key_down(self, command: str):
        """Apply a pressed command; unknown commands are ignored"""
        if command not in COMMANDS:
            return
        p = self.player
        if command == "fire":
            p.firing = True
        elif command == "up":
            p.ay = -1
        elif command == "down":
            p.ay = 1
        elif command == "left":
            p.ax = -1
        elif command == "right":
            p.ax = 1

    def key_up(self, command: str):
        """Release a command; a direction only stops its own acceleration"""
        if command not in COMMANDS:
            return
        p = self.player
        if command == "fire":
            p.firing = False
        elif command == "up" and p.ay < 0:
            p.ay = 0
        elif command == "down" and p.ay > 0:
            p.ay = 0
        elif command == "left" and p.ax < 0:
            p.ax = 0
        elif command == "right" and p.ax > 0:
            p.ax = 0

    def advance_phase(self) -> Phase:
        """Apply the transition table; leaving game-over starts a fresh session"""
        previous = self.phase
        self.phase = next_phase(previous)
        if previous is Phase.GAME_OVER:
            self.reset()
            logger.info("Session reset")
        logger.info("Phase %s -> %s", previous.value, self.phase.value)
        return self.phase

    # ----------------------------
    # Frame loop
    # ----------------------------

    def on_frame(self, timestamp: float):
        """Handle one scheduled frame; `timestamp` is monotonic, in ms"""
        delta = 0.0 if self._last_stamp is None else timestamp - self._last_stamp
        # every phase records the stamp, so time spent outside of
        # playing never shows up as elapsed time
        self._last_stamp = timestamp

        if self.phase is Phase.PLAYING:
            self._play_frame(delta)

    def _play_frame(self, delta: float):
        self.events = {"kills": 0, "damage": 0}
        self.clock += max(delta, 0.0)
        now = self.clock

        self.move_entities()
        self.spawn_entities(now)
        self.resolve_collisions()
        self.hud.update(delta)

        # Are we dead yet?
        if not self.player.alive:
            self._game_over()

    def _game_over(self):
        logger.info("Game over after %d hits", self.hit_count)
        self.init_player()
        self.phase = Phase.GAME_OVER

    # ----------------------------
    # Movement
    # ----------------------------

    def move_entities(self):
        for layer in self.layers:
            layer.advance()
        self._move_player()
        for b in self.player_bullets:
            b.y += b.vy
        self._move_enemies()
        for b in self.enemy_bullets:
            b.y += b.vy

    def _move_player(self):
        p = self.player
        vx, vy = p.vx, p.vy

        p.vx = step_velocity(p.vx, p.ax, self.player_max_velocity)
        p.vy = step_velocity(p.vy, p.ay, self.player_max_velocity)

        # move with the velocity the frame started with, but never out of
        # the arena; velocity is kept when blocked by a wall
        if 0 <= p.x + vx <= self.width:
            p.x += vx
        if 0 <= p.y + vy <= self.height:
            p.y += vy

    def _move_enemies(self):
        for e in self.enemies:
            # turn around one frame after leaving the arena
            if e.from_left and e.x > self.width:
                e.from_left = False
            elif not e.from_left and e.x < 0:
                e.from_left = True
            e.x += self.enemy_velocity if e.from_left else -self.enemy_velocity

    # ----------------------------
    # Spawner
    # ----------------------------

    def spawn_entities(self, now: float):
        p = self.player
        if p.firing and (now - p.last_shot) > self.player_reload_time:
            self.player_bullets.append(Bullet(x=p.x, y=p.y, vy=-self.player_bullet_velocity))
            p.last_shot = now

        amount = len(self.enemies)
        if amount < self.max_enemies and (now - self.last_enemy_insertion) > self.enemy_insertion_interval:
            # alternating left or right sided entry
            from_left = amount % 2 == 1
            self.enemies.append(Enemy(
                x=0 if from_left else self.width,
                y=self.enemy_spawn_y,
                from_left=from_left,
                hp=self.enemy_strength,
            ))
            self.last_enemy_insertion = now

        # one timer for all enemies: they fire in lockstep
        if (now - self.last_enemy_shot) > self.enemy_reload_time:
            for e in self.enemies:
                self.enemy_bullets.append(Bullet(x=e.x, y=e.y, vy=self.enemy_bullet_velocity))
            self.last_enemy_shot = now

    # ----------------------------
    # Collision resolution
    # ----------------------------

    def resolve_collisions(self):
        """
        Test all bullets against their targets, then compact the lists.

        Every pair is evaluated against the entity set the frame started
        with: a bullet keeps hitting overlapping enemies after its first
        hit, and removal only happens once all tests are done.

        A bullet that hit something is consumed at the end of the frame. It
        never flies on to hit the same or another target in a later frame.
        """
        for b in self.player_bullets + self.enemy_bullets:
            if not in_bounds(b.x, b.y, self.width, self.height):
                b.alive = False

        # Player bullets vs enemies
        multiplier = self.enemy_size_multiplier
        hit_bullets = []
        for b in self.player_bullets:
            if not b.alive:
                continue
            for e in self.enemies:
                if not e.alive:
                    continue
                # the enemy's size is its bounding box
                if box_collide(b.x, b.y, e.x, e.y, e.size(multiplier)):
                    hit_bullets.append(b)
                    e.hp -= 1
                    if e.hp <= 0:
                        e.alive = False
                        self.hit_count += 1
                        self.events["kills"] += 1
                        logger.debug("Enemy destroyed at (%.0f, %.0f)", e.x, e.y)
        for b in hit_bullets:
            b.alive = False

        # Enemy bullets vs player
        p = self.player
        size = p.size
        for b in self.enemy_bullets:
            if not b.alive:
                continue
            if box_collide(p.x, p.y, b.x, b.y, size):
                b.alive = False
                damage = min(self.player_hit_damage, p.size)
                p.size -= damage
                self.events["damage"] += damage

        self.player_bullets = [b for b in self.player_bullets if b.alive]
        self.enemy_bullets = [b for b in self.enemy_bullets if b.alive]
        self.enemies = [e for e in self.enemies if e.alive]

    # ----------------------------
    # HUD
    # ----------------------------

    def fps_text(self) -> str:
        return self.hud.fps_text()

    def score_text(self) -> str:
        return self.hud.score_text(self.hit_count)
