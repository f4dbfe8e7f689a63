"""
Configuration for the shoot-em-up
Simulation constants, background layers, colors, window and headless env settings
"""

# Simulation parameters (passed as Simulation(**GAME_CONFIG))
GAME_CONFIG = {
    "width": 960,
    "height": 540,
    # player size in pixels is also the health
    "player_size": 20,
    "player_max_velocity": 7,      # maximum speed in any direction
    "player_bullet_velocity": 10,  # bullets move north
    "player_reload_time": 100,     # milliseconds until next bullet
    "player_hit_damage": 2,        # size lost per enemy bullet hit
    "enemy_insertion_interval": 1000,  # milliseconds until next enemy
    "max_enemies": 4,              # but not more than four at a time
    "enemy_velocity": 5,           # only side ways moving enemies
    "enemy_strength": 4,           # enemy hitpoints
    "enemy_size_multiplier": 5,    # size = hitpoints * multiplier
    "enemy_spawn_y": 50,
    "enemy_bullet_velocity": 10,   # bullets move south
    "enemy_reload_time": 100,      # shared by all enemies
    "fps_interval": 10,            # recompute fps every n-th frame
}

# ==============================================================================
# BACKGROUND
# Two layers of boxes moving at different speeds create the parallax effect
# ==============================================================================

BACKGROUND_CONFIG = [
    {
        "name": "lower",
        "shift_x": 15,
        "speed": 2,
        "tile_size": 40,
        "color": (0x11, 0x11, 0x11),
        "parallax_x": 0.1,
        "parallax_y": 0.05,
    },
    {
        "name": "upper",
        "shift_x": 0,
        "speed": 3,
        "tile_size": 50,
        "color": (0x1A, 0x1A, 0x1A),
        "parallax_x": 0.2,
        "parallax_y": 0.1,
    },
]

# ==============================================================================
# RENDERING
# ==============================================================================

COLORS = {
    "clear": (0, 0, 0),
    "player": (128, 128, 128),
    "player_bullet": (255, 255, 0),
    "enemy": (255, 0, 0),
    "enemy_bullet": (255, 0, 0),
    "text": (255, 255, 255),
}

BULLET_SIZE = 5

WINDOW_CONFIG = {
    "title": "Freddy vs JSON",
    "update_rate": 1 / 60,
    "font_size": 16,
    "font_name": ("Courier New", "monospace"),
}

# ==============================================================================
# HEADLESS ENVIRONMENT
# ==============================================================================

ENV_CONFIG = {
    "frame_ms": 1000 / 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 4,
    "m_bullets": 8,
}

REWARD_CONFIG = {
    "R_KILL": 1.0,       # Reward for destroying an enemy
    "R_DAMAGE": 0.1,     # Penalty per size unit lost
    "R_TIME": 0.001,     # Small reward for every frame survived
    "R_DEATH": 5.0,      # Death penalty
}
