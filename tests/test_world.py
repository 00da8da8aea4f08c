import pytest

from paddle_shooter.utils import GameInitError
from paddle_shooter.world import EntityStore, World

from conftest import HEIGHT, WIDTH


class Thing:
    index = -1


def test_entity_store_never_reuses_indices():
    store = EntityStore()
    first = store.add(Thing())
    store.remove(first)
    second = store.add(Thing())

    assert (first, second) == (0, 1)
    assert first not in store
    assert store.add(Thing()) == 2


def test_entity_store_remove_missing_index_is_noop():
    store = EntityStore()
    store.add(Thing())

    store.remove(0)
    store.remove(0)
    store.remove(42)

    assert len(store) == 0


def test_entity_store_snapshot_survives_removal():
    store = EntityStore()
    for _ in range(4):
        store.add(Thing())

    seen = []
    for index in store.snapshot():
        if store.get(index) is None:
            continue
        seen.append(index)
        store.remove(index + 1)

    assert seen == [0, 2]
    assert store.snapshot() == [0, 2]


def test_world_requires_scheduler():
    with pytest.raises(GameInitError):
        World(WIDTH, HEIGHT, None)
    with pytest.raises(GameInitError):
        World(WIDTH, HEIGHT, object())


def test_fresh_world(world):
    assert world.score == 0
    assert world.life == 0
    assert world.lives == world.max_lives
    assert len(world.enemies) == world.max_enemies
    assert world.enemies_alive == world.max_enemies
    assert not world.paused
    assert not world.game_over
    assert world.player.invincible
    assert world.player.x == WIDTH / 2 - 30
    assert world.player.y == HEIGHT - 20


def test_start_invincibility_lasts_two_seconds(world, advance):
    advance(1999)
    assert world.player.invincible
    advance(1)
    assert not world.player.invincible


def test_record_kill_scores_and_reserves_replacement(world, scheduler, advance):
    world.enemies.remove(0)
    pending = scheduler.pending_timers

    world.record_kill()

    assert world.score == 15
    assert world.enemies_alive == world.max_enemies
    assert scheduler.pending_timers == pending + 1

    advance(2000)
    assert len(world.enemies) == world.max_enemies


def test_record_kill_never_goes_below_zero(world):
    world.enemies_alive = 0

    world.record_kill()

    assert world.enemies_alive == 1
    assert world.score == 15


def test_record_kill_above_cap_schedules_nothing(world, scheduler):
    world.enemies_alive = world.max_enemies + 1
    pending = scheduler.pending_timers

    world.record_kill()

    assert world.enemies_alive == world.max_enemies
    assert scheduler.pending_timers == pending


def test_concurrent_respawns_each_add_an_enemy(world, advance):
    world.enemies_alive = 4

    world.record_kill()
    world.record_kill()
    advance(2000)

    assert len(world.enemies) == world.max_enemies + 2


def test_respawn_fires_while_paused(world, advance):
    world.enemies.remove(0)
    world.record_kill()
    world.pause()

    advance(2000)

    assert len(world.enemies) == world.max_enemies
    assert world.paused


def test_lose_life_grants_invincibility(world, advance):
    advance(2000)
    assert not world.player.invincible

    world.lose_life()

    assert world.life == 1
    assert world.player.invincible
    assert not world.game_over
    assert not world.paused

    advance(1999)
    assert world.player.invincible
    advance(1)
    assert not world.player.invincible


def test_lose_last_life_is_game_over(world):
    world.life = world.max_lives - 1

    world.lose_life()

    assert world.game_over
    assert world.paused
    assert world.lives == 0


def test_reset_after_game_over(world, advance):
    world.score = 90
    world.life = world.max_lives - 1
    world.lose_life()
    world.player.shoot(world)

    world.reset()

    assert world.score == 0
    assert world.life == 0
    assert not world.game_over
    assert not world.paused
    assert len(world.enemies) == world.max_enemies
    assert len(world.bullets) == 0
    assert world.player.invincible

    advance(1999)
    assert world.player.invincible
    advance(1)
    assert not world.player.invincible


def test_reset_drops_timers_from_previous_session(world, advance):
    world.enemies.remove(0)
    world.record_kill()
    advance(1500)

    world.reset()
    advance(500)

    assert len(world.enemies) == world.max_enemies
    assert world.player.invincible

    advance(1500)
    assert not world.player.invincible


def test_spawn_explosion_adds_max_particles(world):
    world.spawn_explosion(10, 20, "blue")

    assert len(world.particles) == world.max_particles
    assert {particle.color for particle in world.particles} == {"blue"}


def test_earlier_window_expiry_keeps_later_window(world, advance):
    advance(200)
    world.invincible_mode(1000)
    advance(1300)
    world.lose_life()

    advance(500)
    assert world.player.invincible

    advance(1499)
    assert world.player.invincible
    advance(1)
    assert not world.player.invincible


def test_shorter_window_does_not_cut_longer_one(world, advance):
    world.invincible_mode(500)

    advance(500)
    assert world.player.invincible
    advance(1500)
    assert not world.player.invincible


def test_world_requires_scheduler_clock():
    class TimerOnly:
        def after(self, milliseconds, callback):
            return 0

    with pytest.raises(GameInitError):
        World(WIDTH, HEIGHT, TimerOnly())
