"""
ShmupEnv - headless gymnasium adapter around the simulation
-----------------------------------------------------------
- Gymnasium API over the same Simulation the arcade window runs
- Synthetic frame timestamps (fixed frame duration) instead of a display clock
- MultiDiscrete action space: [horizontal(3), vertical(3), fire(2)]
- Vector observation: player state + top-K nearest enemies + top-M nearest
  enemy bullets

Quick test:
    python -m shmup.game.shmup_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from ..configs.shmup_config import GAME_CONFIG, ENV_CONFIG, REWARD_CONFIG
from .phases import Phase
from .simulation import Simulation
from .utils import clamp

# action index -> command held on that axis
HORIZONTAL = (None, "left", "right")
VERTICAL = (None, "up", "down")


class ShmupEnv(gym.Env):
    """Shoot-em-up environment stepping one frame per action"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        frame_ms: float = ENV_CONFIG["frame_ms"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_enemies: int = ENV_CONFIG["k_enemies"],
        m_bullets: int = ENV_CONFIG["m_bullets"],
        reward_config: Optional[Dict[str, float]] = None,
        **game_config,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        self.frame_ms = frame_ms
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.m_bullets = m_bullets
        self.rewards = dict(REWARD_CONFIG if reward_config is None else reward_config)

        self.sim = Simulation(**{**GAME_CONFIG, **game_config})

        self.action_space = spaces.MultiDiscrete([3, 3, 2])

        # Player: pos(2) vel(2) size(1)
        # Each enemy: rel pos(2) hp(1)
        # Each enemy bullet: rel pos(2)
        obs_dim = 2 + 2 + 1 + (self.k_enemies * 3) + (self.m_bullets * 2)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._stamp = 0.0
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self.sim.phase = Phase.WELCOME
        self.sim.reset()
        self.sim.on_frame(self._stamp)
        self.sim.advance_phase()  # welcome -> playing

        return self._get_obs(), self._get_info()

    def step(self, action):
        horizontal, vertical, fire = int(action[0]), int(action[1]), int(action[2])

        self._hold(HORIZONTAL, horizontal)
        self._hold(VERTICAL, vertical)
        if fire:
            self.sim.key_down("fire")
        else:
            self.sim.key_up("fire")

        self._stamp += self.frame_ms
        self.sim.on_frame(self._stamp)

        terminated = self.sim.phase is Phase.GAME_OVER
        reward = self._compute_reward(terminated)
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _hold(self, commands, index: int):
        for i, command in enumerate(commands):
            if command is None:
                continue
            if i == index:
                self.sim.key_down(command)
            else:
                self.sim.key_up(command)

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        sim = self.sim
        p = sim.player
        max_v = max(1, sim.player_max_velocity)

        obs_parts = [p.x / sim.width * 2 - 1, p.y / sim.height * 2 - 1,  # map to [-1,1]
                     clamp(p.vx / max_v, -1, 1), clamp(p.vy / max_v, -1, 1),
                     p.size / sim.player_size * 2 - 1]

        def rel(x, y):
            return [clamp((x - p.x) / sim.width, -1, 1), clamp((y - p.y) / sim.height, -1, 1)]

        def nearest(items):
            return sorted(items, key=lambda o: (o.x - p.x) ** 2 + (o.y - p.y) ** 2)

        enemies = nearest(sim.enemies)
        for i in range(self.k_enemies):
            if i < len(enemies):
                e = enemies[i]
                obs_parts += rel(e.x, e.y) + [e.hp / sim.enemy_strength * 2 - 1]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        bullets = nearest(sim.enemy_bullets)
        for i in range(self.m_bullets):
            if i < len(bullets):
                obs_parts += rel(bullets[i].x, bullets[i].y)
            else:
                obs_parts += [0.0, 0.0]

        return np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)

    def _compute_reward(self, terminated: bool) -> float:
        events = self.sim.events
        reward = 0.0
        reward += self.rewards["R_KILL"] * events.get("kills", 0)
        reward -= self.rewards["R_DAMAGE"] * events.get("damage", 0)
        reward += self.rewards["R_TIME"]
        if terminated:
            reward -= self.rewards["R_DEATH"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "phase": self.sim.phase.value,
            "hit_count": self.sim.hit_count,
            "player_size": self.sim.player.size,
            "num_enemies": len(self.sim.enemies),
            "num_bullets": len(self.sim.player_bullets) + len(self.sim.enemy_bullets),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # imported here so headless use never needs a display
            from .window import ShmupWindow
            self._window = ShmupWindow(self.sim)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def run_random_episode(render: bool = False, seed: Optional[int] = None, **env_kwargs) -> Dict[str, Any]:
    """Play one episode with random actions and return its statistics"""
    env = ShmupEnv(render_mode="human" if render else None, **env_kwargs)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0
    steps = 0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        steps += 1

    env.close()
    return {"return": total, "length": steps, "hit_count": info["hit_count"], "died": terminated}


if __name__ == "__main__":
    result = run_random_episode(seed=42)
    print(f"Random episode return: {result['return']:.2f} "
          f"({result['length']} frames, {result['hit_count']} hits)")
