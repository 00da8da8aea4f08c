"""
Explosion particles
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from paddle_shooter.constants import (
    PARTICLE_COLOR,
    PARTICLE_DECAY,
    PARTICLE_GRAVITY,
    PARTICLE_MAX_LIFE,
    PARTICLE_SIZE,
)
from paddle_shooter.utils import random_int

if TYPE_CHECKING:
    from paddle_shooter.world import World


@dataclass
class Particle:
    """
    Shrinking square thrown out of an explosion
    """

    x: float
    y: float
    vx: float
    vy: float
    color: Any = PARTICLE_COLOR
    size: float = PARTICLE_SIZE
    gravity: float = PARTICLE_GRAVITY
    life: int = 0
    max_life: int = PARTICLE_MAX_LIFE
    index: int = -1

    @classmethod
    def burst(cls, rng: random.Random, x: float, y: float, color: Any = None) -> Particle:
        return cls(
            x=x,
            y=y,
            vx=random_int(rng, -5, 5),
            vy=random_int(rng, -5, 5),
            color=PARTICLE_COLOR if color is None else color,
        )

    def tick(self, world: World, surface) -> None:
        """
        Advance one frame and draw. Physics only moves when the particle is drawn.

        :param world: Current session
        :type world: World

        :param surface: Render surface
        """
        self.x += self.vx
        self.y += self.vy
        self.vy += self.gravity
        self.size *= PARTICLE_DECAY

        surface.fill_rect(self.x, self.y, self.size, self.size, self.color)

        self.life += 1
        if self.life >= self.max_life:
            world.particles.remove(self.index)
