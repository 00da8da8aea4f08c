"""
Paddle Shooter utils
"""

import logging
import math
import random

import pygame

logger = logging.getLogger("paddle_shooter")


class GameInitError(RuntimeError):
    """
    Raised when the game cannot be wired up (missing surface or scheduler)
    """


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logging handler

    :param level: Name of the logging level
    :type level: str
    """

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def random_int(rng: random.Random, low: int, high: int) -> int:
    """
    Return a random integer in ``[low, high)``

    :param rng: Random generator to draw from
    :type rng: random.Random

    :param low: Inclusive lower bound
    :type low: int

    :param high: Exclusive upper bound
    :type high: int

    :return: int
    """

    return math.floor(rng.random() * (high - low) + low)


def collision(a, b) -> bool:
    """
    Check whether two boxes overlap. Touching edges count as overlap.

    Both objects need ``x``, ``y``, ``width`` and ``height``.

    :return: bool
    """

    return not (
        a.y + a.height < b.y
        or a.y > b.y + b.height
        or a.x + a.width < b.x
        or a.x > b.x + b.width
    )


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :raise SystemExit: If the display cannot be opened

    :return: pygame.Surface
    """

    try:
        screen = pygame.display.set_mode((width, height))
    except pygame.error as message:
        logger.error(f"Failed to open the display: {message}")
        raise SystemExit(message) from message

    pygame.display.set_caption(caption)

    return screen
