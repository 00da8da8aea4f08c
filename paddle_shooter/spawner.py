"""
Enemy respawn
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paddle_shooter.constants import RESPAWN_DELAY
from paddle_shooter.utils import logger

if TYPE_CHECKING:
    from paddle_shooter.world import World


class Spawner:
    """
    Adds replacement enemies after a delay
    """

    def __init__(self, world: World, delay: int = RESPAWN_DELAY):
        """
        :param world: Session to spawn into
        :type world: World

        :param delay: Delay in milliseconds
        :type delay: int
        """
        self._world = world
        self.delay = delay

    def request(self) -> int:
        """
        Schedule one new enemy. Every request adds exactly one enemy.

        :return: Timer handle
        :rtype: int
        """
        logger.debug(f"Enemy respawn in {self.delay}ms")
        return self._world.schedule(self.delay, self._world.spawn_enemy)
