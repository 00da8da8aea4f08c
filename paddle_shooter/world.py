"""
Session state shared by the loop, the entities and the input controller
"""

from __future__ import annotations

import random
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from paddle_shooter.alien import Enemy, EnemyBullet
from paddle_shooter.constants import (
    HIT_INVINCIBILITY,
    KILL_SCORE,
    MAX_ENEMIES,
    MAX_LIVES,
    MAX_PARTICLES,
    START_INVINCIBILITY,
)
from paddle_shooter.particle import Particle
from paddle_shooter.ship import Bullet, Player
from paddle_shooter.spawner import Spawner
from paddle_shooter.utils import GameInitError, logger

T = TypeVar("T")


class EntityStore(Generic[T]):
    """
    Entities keyed by an index that only ever grows.

    Removing an entity leaves a hole; indices are never reused. Iterate over
    :meth:`snapshot` when entities may be removed during the loop.
    """

    def __init__(self):
        self._entities: Dict[int, T] = {}
        self._next_index = 0

    def add(self, entity: T) -> int:
        """
        Store ``entity`` under a fresh index and tell it its index

        :return: The new index
        :rtype: int
        """
        index = self._next_index
        self._next_index += 1
        entity.index = index
        self._entities[index] = entity
        return index

    def remove(self, index: int) -> None:
        """
        Remove the entity at ``index``. Removing a missing index does nothing.
        """
        self._entities.pop(index, None)

    def get(self, index: int) -> Optional[T]:
        return self._entities.get(index)

    def snapshot(self) -> List[int]:
        return list(self._entities)

    def __contains__(self, index: int) -> bool:
        return index in self._entities

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._entities.values()))

    def __len__(self) -> int:
        return len(self._entities)


class World:  # pylint: disable=too-many-instance-attributes
    """
    One game session: entities, score, lives and flags
    """

    max_lives = MAX_LIVES
    max_enemies = MAX_ENEMIES
    max_particles = MAX_PARTICLES

    def __init__(
        self,
        width: int,
        height: int,
        scheduler,
        rng: Optional[random.Random] = None,
    ):
        """
        :param width: Width of the canvas
        :type width: int

        :param height: Height of the canvas
        :type height: int

        :param scheduler: Provides ``after(milliseconds, callback)`` and ``now()``

        :param rng: Random generator used for spawning
        :type rng: random.Random

        :raise GameInitError: If no usable scheduler is given
        """
        if scheduler is None or not all(
            callable(getattr(scheduler, name, None)) for name in ("after", "now")
        ):
            raise GameInitError("World needs a scheduler with after() and now()")

        self.width = width
        self.height = height
        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.spawner = Spawner(self)
        self.generation = 0

        self.reset()

    def reset(self) -> None:
        """
        Start a new session. Timers from the previous session are ignored.
        """
        self.generation += 1
        logger.info(f"Starting session {self.generation}")

        self.score = 0
        self.life = 0
        self.frame = 0
        self.paused = False
        self.game_over = False
        self.shooting = False
        self.one_shot = False

        self.bullets: EntityStore[Bullet] = EntityStore()
        self.enemy_bullets: EntityStore[EnemyBullet] = EntityStore()
        self.enemies: EntityStore[Enemy] = EntityStore()
        self.particles: EntityStore[Particle] = EntityStore()

        self.player = Player.centered(self.width, self.height)
        self.invincible_until = 0

        self.enemies_alive = 0
        for _ in range(self.max_enemies):
            self.spawn_enemy()
            self.enemies_alive += 1

        self.invincible_mode(START_INVINCIBILITY)

    @property
    def lives(self) -> int:
        return self.max_lives - self.life

    def schedule(self, milliseconds: int, callback: Callable[[], None]) -> int:
        """
        Schedule ``callback`` for this session only.

        If the world is reset before the delay elapses the callback is dropped.

        :return: Timer handle
        :rtype: int
        """
        generation = self.generation

        def run():
            if generation != self.generation:
                logger.debug(f"Dropping timer from session {generation}")
                return
            callback()

        return self.scheduler.after(milliseconds, run)

    def invincible_mode(self, milliseconds: int) -> None:
        """
        Make the player invincible for at least ``milliseconds``.

        Overlapping windows extend each other; an earlier window expiring
        never ends a later one.

        :param milliseconds: Length of the window
        :type milliseconds: int
        """
        self.player.invincible = True
        self.invincible_until = max(self.invincible_until, self.scheduler.now() + milliseconds)
        self.schedule(milliseconds, self._end_invincibility)

    def _end_invincibility(self) -> None:
        if self.scheduler.now() >= self.invincible_until:
            self.player.invincible = False

    def spawn_enemy(self) -> Enemy:
        enemy = Enemy.random(self.rng, self.width)
        self.enemies.add(enemy)
        logger.debug(f"Spawned enemy {enemy.index} at ({enemy.x}, {enemy.y})")
        return enemy

    def spawn_explosion(self, x: float, y: float, color=None) -> None:
        for _ in range(self.max_particles):
            self.particles.add(Particle.burst(self.rng, x, y, color))

    def record_kill(self) -> None:
        """
        Award the kill and reserve a replacement enemy.

        The alive count goes back up before the replacement arrives so that
        further kills do not schedule extra enemies.
        """
        self.score += KILL_SCORE
        self.enemies_alive = max(0, self.enemies_alive - 1)
        logger.debug(f"Score: {self.score}")

        if self.enemies_alive < self.max_enemies:
            self.enemies_alive += 1
            self.spawner.request()

    def lose_life(self) -> None:
        """
        Take a life, or end the game when the last one is gone
        """
        if self.life < self.max_lives - 1:
            self.life += 1
            logger.info(f"Life lost, {self.lives} left")
            self.invincible_mode(HIT_INVINCIBILITY)
            return

        self.life = self.max_lives
        self.pause()
        self.game_over = True
        logger.info(f"Game over, score: {self.score}")

    def pause(self) -> None:
        """
        Stop the loop on its next tick
        """
        self.paused = True

    def unpause(self) -> None:
        """
        Let the loop run again once it is restarted
        """
        self.paused = False
