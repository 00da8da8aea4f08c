"""
Input controller
"""

import pygame

from paddle_shooter.constants import RESUME_INVINCIBILITY
from paddle_shooter.loop import GameLoop
from paddle_shooter.utils import logger

FIRE_KEYS = (pygame.K_SPACE,)
LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


class InputController:
    """
    Turns key and click events into world changes. Unknown keys are ignored.
    """

    def __init__(self, loop: GameLoop):
        """
        :param loop: Loop to pause, resume and restart
        :type loop: GameLoop
        """
        self._loop = loop

    @property
    def world(self):
        return self._loop.world

    def key_down(self, key: int) -> None:
        """
        Start shooting or moving

        :param key: pygame key code
        :type key: int
        """
        if key in FIRE_KEYS:
            self.world.shooting = True
        if key in LEFT_KEYS:
            self.world.player.moving_left = True
        if key in RIGHT_KEYS:
            self.world.player.moving_right = True

    def key_up(self, key: int) -> None:
        """
        Stop shooting or moving

        :param key: pygame key code
        :type key: int
        """
        if key in FIRE_KEYS:
            self.world.shooting = False
            self.world.one_shot = False
        if key in LEFT_KEYS:
            self.world.player.moving_left = False
        if key in RIGHT_KEYS:
            self.world.player.moving_right = False

    def key_press(self, key: int) -> None:
        """
        Fire a single shot per press, or restart after game over
        """
        if key not in FIRE_KEYS:
            return

        world = self.world
        if not world.player.invincible and not world.one_shot:
            world.player.shoot(world)
            world.one_shot = True

        if world.game_over:
            self.restart()

    def click(self) -> None:
        """
        Pause, resume, or restart after game over
        """
        world = self.world
        if not world.paused:
            logger.debug("Pausing")
            world.pause()
        elif world.game_over:
            self.restart()
        else:
            logger.debug("Resuming")
            world.unpause()
            self._loop.start()
            world.invincible_mode(RESUME_INVINCIBILITY)

    def restart(self) -> None:
        """
        Start a new session and restart the loop
        """
        logger.info("Restarting")
        self.world.reset()
        self._loop.start()
