"""
Alien class
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from paddle_shooter.constants import BULLET_SIZE, ENEMY_BULLET_SPEED, ENEMY_SIZE
from paddle_shooter.utils import collision, logger, random_int

if TYPE_CHECKING:
    from paddle_shooter.world import World


def random_color(rng: random.Random) -> pygame.Color:
    """
    Saturated color with a random hue

    :param rng: Random generator to draw from
    :type rng: random.Random

    :return: pygame.Color
    """
    color = pygame.Color(0, 0, 0)
    color.hsla = (random_int(rng, 0, 360), 60, 50, 100)
    return color


@dataclass
class EnemyBullet:
    """
    Bullet fired downward by an enemy
    """

    x: float
    y: float
    color: pygame.Color
    width: int = BULLET_SIZE[0]
    height: int = BULLET_SIZE[1]
    vy: float = ENEMY_BULLET_SPEED
    index: int = -1

    def draw(self, surface) -> None:
        """
        Draw the bullet

        :param surface: Render surface
        """
        surface.fill_rect(self.x, self.y, self.width, self.height, self.color)

    def update(self, world: World) -> None:
        """
        Move the bullet down, removing it once it leaves the bottom edge

        :param world: Current session
        :type world: World
        """
        self.y += self.vy

        if self.y > world.height:
            world.enemy_bullets.remove(self.index)


@dataclass
class Enemy:
    """
    Enemy bouncing between the side edges while drifting down
    """

    x: float
    y: float
    speed: int
    vy: float
    shooting_speed: int
    moving_left: bool
    color: pygame.Color
    width: int = ENEMY_SIZE[0]
    height: int = ENEMY_SIZE[1]
    alive: bool = True
    index: int = -1

    @classmethod
    def random(cls, rng: random.Random, canvas_width: int) -> Enemy:
        """
        Enemy with randomized position, speed, drift, cadence, direction and color

        :param rng: Random generator to draw from
        :type rng: random.Random

        :param canvas_width: Width of the canvas
        :type canvas_width: int

        :return: Enemy
        """
        width = ENEMY_SIZE[0]
        return cls(
            x=random_int(rng, 0, canvas_width - width),
            y=random_int(rng, 10, 40),
            vy=random_int(rng, 1, 3) * 0.1,
            speed=random_int(rng, 2, 3),
            shooting_speed=random_int(rng, 30, 80),
            moving_left=rng.random() < 0.5,
            color=random_color(rng),
        )

    def draw(self, surface) -> None:
        """
        Draw the enemy

        :param surface: Render surface
        """
        surface.fill_rect(self.x, self.y, self.width, self.height, self.color)

    def update(self, world: World) -> None:
        """
        Move one step, or turn around when at an edge, then check player bullets

        :param world: Current session
        :type world: World
        """
        if self.moving_left:
            if self.x > 0:
                self.x -= self.speed
                self.y += self.vy
            else:
                self.moving_left = False
        else:
            if self.x + self.width < world.width:
                self.x += self.speed
                self.y += self.vy
            else:
                self.moving_left = True

        for index in world.bullets.snapshot():
            bullet = world.bullets.get(index)
            if bullet is not None and collision(bullet, self):
                logger.debug(f"Enemy {self.index} hit by bullet {index}")
                self.die(world)
                world.bullets.remove(index)
                break

    def die(self, world: World) -> None:
        """
        Explode, leave the fleet and award the kill
        """
        self.alive = False
        world.spawn_explosion(self.x + self.width / 2, self.y, self.color)
        world.enemies.remove(self.index)
        world.record_kill()

    def shoot(self, world: World) -> EnemyBullet:
        """
        Fire a bullet from the bottom of the enemy

        :param world: Current session
        :type world: World

        :return: EnemyBullet
        """
        bullet = EnemyBullet(
            x=self.x + self.width / 2 - BULLET_SIZE[0] / 2,
            y=self.y + self.height,
            color=self.color,
        )
        world.enemy_bullets.add(bullet)
        return bullet
