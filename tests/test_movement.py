from shmup.game.background import BackgroundLayer
from shmup.game.entities import Enemy
from shmup.game.utils import step_velocity

from conftest import make_playing, run_frames


def test_velocity_saturates_at_max():
    sim = make_playing(player_max_velocity=7)
    sim.key_down("right")
    stamp = 0
    for frame in range(1, 8):
        stamp = run_frames(sim, 1, start=stamp)
        assert sim.player.vx == frame
    run_frames(sim, 1, start=stamp)
    assert sim.player.vx == 7


def test_wall_blocks_movement_but_keeps_velocity():
    sim = make_playing(player_max_velocity=5)
    sim.player.x = sim.width
    sim.player.vx = 5
    sim.key_down("right")

    run_frames(sim, 3)
    assert sim.player.x == sim.width
    assert sim.player.vx == 5


def test_wall_blocks_move_that_would_leave_the_arena():
    sim = make_playing()
    sim.player.x = 2
    sim.player.vx = -5
    sim.key_down("left")
    run_frames(sim, 1)
    assert sim.player.x == 2
    assert sim.player.vx == -6


def test_linear_friction_without_acceleration():
    sim = make_playing()
    sim.player.vx = 3
    sim.player.vy = -2
    seen = []
    stamp = 0
    for _ in range(4):
        stamp = run_frames(sim, 1, start=stamp)
        seen.append((sim.player.vx, sim.player.vy))
    assert seen == [(2, -1), (1, 0), (0, 0), (0, 0)]


def test_position_uses_velocity_from_start_of_frame():
    sim = make_playing()
    x0 = sim.player.x
    sim.key_down("right")
    run_frames(sim, 1)
    assert sim.player.x == x0
    run_frames(sim, 1, start=16)
    assert sim.player.x == x0 + 1


def test_step_velocity():
    assert step_velocity(0, 1, 7) == 1
    assert step_velocity(7, 1, 7) == 7
    assert step_velocity(-7, -1, 7) == -7
    assert step_velocity(7, -1, 7) == 7
    assert step_velocity(-3, 0, 7) == -2
    assert step_velocity(0, 0, 7) == 0


def test_reversing_at_full_speed_keeps_velocity_until_release():
    sim = make_playing(player_max_velocity=7)
    sim.player.vx = 7
    sim.key_down("left")
    stamp = run_frames(sim, 3)
    assert sim.player.vx == 7

    sim.key_up("left")
    run_frames(sim, 1, start=stamp)
    assert sim.player.vx == 6


def test_release_only_cancels_own_direction():
    sim = make_playing()
    sim.key_down("right")
    sim.key_down("left")
    assert sim.player.ax == -1
    sim.key_up("right")
    assert sim.player.ax == -1
    sim.key_up("left")
    assert sim.player.ax == 0

    sim.key_down("up")
    sim.key_up("down")
    assert sim.player.ay == -1


def test_unknown_commands_are_ignored():
    sim = make_playing()
    before = (sim.player.ax, sim.player.ay, sim.player.firing)
    sim.key_down("jump")
    sim.key_up("jump")
    assert (sim.player.ax, sim.player.ay, sim.player.firing) == before


def test_fire_flag():
    sim = make_playing()
    sim.key_down("fire")
    assert sim.player.firing
    sim.key_up("fire")
    assert not sim.player.firing


def test_enemy_turns_one_frame_after_leaving_arena():
    sim = make_playing(enemy_velocity=5)
    inside = Enemy(x=sim.width - 2, y=50, from_left=True, hp=4)
    outside = Enemy(x=sim.width + 3, y=50, from_left=True, hp=4)
    left_out = Enemy(x=-1, y=50, from_left=False, hp=4)
    sim.enemies = [inside, outside, left_out]

    sim.move_entities()

    assert inside.x == sim.width + 3 and inside.from_left
    assert outside.x == sim.width - 2 and not outside.from_left
    assert left_out.x == 4 and left_out.from_left


def test_background_shift_wraps():
    layer = BackgroundLayer(name="lower", shift_x=15, speed=2, tile_size=40,
                            color=(17, 17, 17), parallax_x=0.1, parallax_y=0.05)
    for _ in range(40):
        layer.advance()
    assert layer.shift_y == 0
    layer.advance()
    assert layer.shift_y == 2


def test_background_parallax_offsets():
    layer = BackgroundLayer(name="upper", shift_x=0, speed=3, tile_size=50,
                            color=(26, 26, 26), parallax_x=0.2, parallax_y=0.1)
    assert next(layer.tiles(960, 540, 0, 0)) == (0, -100)
    assert next(layer.tiles(960, 540, 100, 200)) == (-20, -120)

    tiles = list(layer.tiles(960, 540, 0, 0))
    # rows at -100, 0, ..., 500 and columns at 0, 100, ..., 900
    assert len(tiles) == 7 * 10


def test_background_only_moves_while_playing():
    sim = make_playing()
    run_frames(sim, 3)
    assert [layer.shift_y for layer in sim.layers] == [6, 9]
    sim.advance_phase()
    run_frames(sim, 3, start=48)
    assert [layer.shift_y for layer in sim.layers] == [6, 9]
