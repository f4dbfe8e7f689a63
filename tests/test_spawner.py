from shmup.game import Phase
from shmup.game.entities import Enemy

from conftest import make_playing, run_frames


def test_player_reload_gate():
    sim = make_playing(player_reload_time=100)
    sim.key_down("fire")

    stamp = run_frames(sim, 6)  # clock 96
    assert sim.player_bullets == []
    stamp = run_frames(sim, 1, start=stamp)  # clock 112
    assert len(sim.player_bullets) == 1
    stamp = run_frames(sim, 6, start=stamp)  # clock 208
    assert len(sim.player_bullets) == 1
    run_frames(sim, 1, start=stamp)  # clock 224
    assert len(sim.player_bullets) == 2


def test_player_bullet_spawns_at_player_and_moves_up():
    sim = make_playing()
    sim.player.firing = True
    sim.spawn_entities(500)
    bullet = sim.player_bullets[0]
    assert (bullet.x, bullet.y) == (sim.player.x, sim.player.y)
    assert bullet.vy == -sim.player_bullet_velocity
    assert sim.player.last_shot == 500


def test_enemies_alternate_sides_up_to_the_cap():
    sim = make_playing(max_enemies=4, enemy_insertion_interval=1000)

    sim.spawn_entities(1001)
    sim.spawn_entities(1500)  # too early
    sim.spawn_entities(2002)
    sim.spawn_entities(3003)
    sim.spawn_entities(4004)
    sim.spawn_entities(5005)  # population cap reached

    assert [(e.x, e.from_left) for e in sim.enemies] == [
        (sim.width, False), (0, True), (sim.width, False), (0, True)
    ]
    assert all(e.hp == sim.enemy_strength for e in sim.enemies)
    assert all(e.y == sim.enemy_spawn_y for e in sim.enemies)
    assert sim.last_enemy_insertion == 4004


def test_enemies_fire_in_lockstep():
    sim = make_playing(enemy_reload_time=100)
    sim.enemies = [Enemy(x=100 * i, y=50, from_left=True, hp=4) for i in range(1, 4)]
    sim.last_enemy_insertion = 10_000  # keep the population fixed

    sim.spawn_entities(101)
    assert [(b.x, b.y) for b in sim.enemy_bullets] == [(100, 50), (200, 50), (300, 50)]
    assert all(b.vy == sim.enemy_bullet_velocity for b in sim.enemy_bullets)

    sim.spawn_entities(150)
    assert len(sim.enemy_bullets) == 3
    sim.spawn_entities(202)
    assert len(sim.enemy_bullets) == 6


def test_pause_does_not_count_as_elapsed_time():
    sim = make_playing()
    sim.key_down("fire")
    stamp = run_frames(sim, 10)
    assert sim.clock == 160
    shots = sim.player.last_shot

    assert sim.advance_phase() is Phase.PAUSED
    sim.on_frame(stamp + 5000)
    sim.on_frame(stamp + 9000)
    assert sim.clock == 160

    assert sim.advance_phase() is Phase.PLAYING
    sim.on_frame(stamp + 9016)
    assert sim.clock == 176
    # the reload gate did not see the pause: no new shot yet
    assert sim.player.last_shot == shots
    assert sim.enemies == []


def test_welcome_time_is_not_playing_time():
    sim = make_playing()
    sim.advance_phase()
    sim.advance_phase()
    sim.phase = Phase.WELCOME
    sim.on_frame(60_000)
    sim.advance_phase()
    sim.on_frame(60_016)
    assert sim.clock == 16
