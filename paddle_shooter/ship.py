"""
Ship class
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from paddle_shooter.constants import (
    AUTO_FIRE_INTERVAL,
    BULLET_SIZE,
    BULLET_SPEED,
    PLAYER_SIZE,
    PLAYER_SPEED,
)
from paddle_shooter.utils import collision, logger

if TYPE_CHECKING:
    from paddle_shooter.world import World


@dataclass
class Bullet:
    """
    Bullet fired upward by the player
    """

    x: float
    y: float
    width: int = BULLET_SIZE[0]
    height: int = BULLET_SIZE[1]
    vy: float = BULLET_SPEED
    color: str = "white"
    index: int = -1

    def draw(self, surface) -> None:
        """
        Draw the bullet

        :param surface: Render surface
        """
        surface.fill_rect(self.x, self.y, self.width, self.height, self.color)

    def update(self, world: World) -> None:
        """
        Move the bullet up, removing it once it leaves the top edge
        """
        self.y -= self.vy

        if self.y < 0:
            world.bullets.remove(self.index)


@dataclass
class Player:
    """
    Player paddle
    """

    x: float
    y: float
    width: int = PLAYER_SIZE[0]
    height: int = PLAYER_SIZE[1]
    speed: int = PLAYER_SPEED
    moving_left: bool = False
    moving_right: bool = False
    invincible: bool = False
    color: str = "white"

    @classmethod
    def centered(cls, canvas_width: int, canvas_height: int) -> Player:
        """
        Player centred horizontally at the bottom of the canvas

        :param canvas_width: Width of the canvas
        :type canvas_width: int

        :param canvas_height: Height of the canvas
        :type canvas_height: int

        :return: Player
        """
        width, height = PLAYER_SIZE
        return cls(x=canvas_width / 2 - width / 2, y=canvas_height - height)

    def draw(self, surface) -> None:
        """
        Draw the paddle

        :param surface: Render surface
        """
        surface.fill_rect(self.x, self.y, self.width, self.height, self.color)

    def move_left(self, pixels: int):
        """
        Move the paddle left, stopping at the edge

        :param pixels: int
        :type pixels: int
        """
        self.x = max(self.x - pixels, 0)

    def move_right(self, pixels: int, canvas_width: int):
        """
        Move the paddle right, stopping at the edge

        :param pixels: int
        :type pixels: int

        :param canvas_width: Width of the canvas
        :type canvas_width: int
        """
        self.x = min(self.x + pixels, canvas_width - self.width)

    def update(self, world: World) -> None:
        """
        Move, auto-fire while the fire key is held, and check enemy bullets

        :param world: Current session
        :type world: World
        """
        if self.moving_left:
            self.move_left(self.speed)
        if self.moving_right:
            self.move_right(self.speed, world.width)

        if world.shooting and world.frame % AUTO_FIRE_INTERVAL == 0:
            self.shoot(world)

        for index in world.enemy_bullets.snapshot():
            bullet = world.enemy_bullets.get(index)
            if bullet is None:
                continue
            if not self.invincible and collision(bullet, self):
                logger.debug(f"Player hit by enemy bullet {index}")
                self.die(world)
                world.enemy_bullets.remove(index)
            if world.game_over:
                break

    def die(self, world: World) -> None:
        """
        Lose a life

        :param world: Current session
        :type world: World
        """
        world.lose_life()

    def shoot(self, world: World) -> Bullet:
        """
        Fire a bullet from the middle of the paddle

        :return: Bullet
        """
        bullet = Bullet(x=self.x + self.width / 2 - BULLET_SIZE[0] / 2, y=world.height - 10)
        world.bullets.add(bullet)
        return bullet
