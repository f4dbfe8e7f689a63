"""
Game phases and the transition table driven by the single "advance" signal
"""

from enum import Enum


class Phase(Enum):
    WELCOME = "welcome"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game-over"


PHASE_TRANSITION = {
    Phase.WELCOME: Phase.PLAYING,
    Phase.PLAYING: Phase.PAUSED,
    Phase.PAUSED: Phase.PLAYING,
    Phase.GAME_OVER: Phase.WELCOME,
}

# abstract commands delivered by the input source
DIRECTIONS = ("up", "down", "left", "right")
COMMANDS = frozenset(DIRECTIONS + ("fire",))


def next_phase(phase: Phase) -> Phase:
    """Phase reached from `phase` when the advance signal arrives"""
    return PHASE_TRANSITION[phase]
