"""Shoot-em-up game module - frame-driven simulation and its adapters"""

from .phases import Phase, PHASE_TRANSITION, next_phase
from .simulation import Simulation
from .shmup_env import ShmupEnv, run_random_episode

__all__ = ['Phase', 'PHASE_TRANSITION', 'next_phase', 'Simulation', 'ShmupEnv', 'run_random_episode']
