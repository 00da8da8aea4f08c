import pygame
import pytest

from paddle_shooter.alien import EnemyBullet
from paddle_shooter.loop import GameLoop
from paddle_shooter.ship import Bullet
from paddle_shooter.utils import GameInitError

from conftest import RecordingSurface


def player_rect(world):
    player = world.player
    return (player.x, player.y, player.width, player.height)


def test_loop_requires_surface_and_scheduler(world, scheduler):
    with pytest.raises(GameInitError):
        GameLoop(world, None, scheduler)
    with pytest.raises(GameInitError):
        GameLoop(world, object(), scheduler)
    with pytest.raises(GameInitError):
        GameLoop(world, RecordingSurface(), None)


def test_start_requests_a_single_frame(loop, scheduler):
    loop.start()
    loop.start()

    assert scheduler.run_frame() == 1
    assert scheduler.frame_pending()


def test_tick_draws_hud_and_reschedules(loop, world, surface, scheduler):
    loop.tick()

    assert surface.calls[0][0] == "clear_rect"
    assert surface.texts() == ["Score: 0", "Lives: 3"]
    assert world.frame == 1
    assert scheduler.frame_pending()


def test_every_enemy_fires_on_frame_zero(loop, world):
    loop.tick()

    assert len(world.enemy_bullets) == world.max_enemies


def test_paused_tick_does_nothing(loop, world, surface, scheduler):
    world.pause()

    loop.tick()

    assert surface.calls == []
    assert world.frame == 0
    assert not scheduler.frame_pending()


def test_invincible_player_blinks(loop, world, surface):
    assert world.player.invincible

    loop.tick()
    assert player_rect(world) in surface.rects()

    surface.reset()
    world.frame = 20
    loop.tick()
    assert player_rect(world) not in surface.rects()

    surface.reset()
    world.frame = 40
    loop.tick()
    assert player_rect(world) in surface.rects()


def test_vulnerable_player_is_always_drawn(loop, world, surface):
    world.player.invincible = False
    world.frame = 20

    loop.tick()

    assert player_rect(world) in surface.rects()


def test_kill_during_tick(loop, world):
    enemy = world.enemies.get(0)
    world.bullets.add(Bullet(x=enemy.x, y=enemy.y))

    loop.tick()

    assert 0 not in world.enemies
    assert world.score == 15
    assert len(world.particles) == 10
    assert all(particle.life == 1 for particle in world.particles)
    assert len(world.enemy_bullets) == world.max_enemies - 1


def test_last_hit_shows_game_over_screen(loop, world, surface, scheduler):
    player = world.player
    player.invincible = False
    world.life = world.max_lives - 1
    world.enemy_bullets.add(EnemyBullet(x=player.x, y=player.y, color=pygame.Color("red")))

    loop.tick()

    assert world.game_over
    assert world.paused
    assert world.frame == 0
    assert not scheduler.frame_pending()
    assert surface.texts() == [
        "Game Over",
        "Score: 0",
        "Click or press Spacebar to Play Again",
        "Score: 0",
        "Lives: 0",
    ]
    hint = [call for call in surface.calls if call[0] == "fill_text"][2]
    assert hint[2] == world.width / 2 - len(hint[1]) * 10 / 2


def test_loop_keeps_running_through_frames(loop, world, scheduler):
    loop.start()
    for _ in range(120):
        scheduler.run_frame()

    assert world.frame == 120
    assert scheduler.frame_pending()
