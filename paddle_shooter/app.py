"""
Paddle Shooter game
"""

import argparse
import random
from typing import List, Optional

import pygame

from paddle_shooter.controller import InputController
from paddle_shooter.loop import GameLoop
from paddle_shooter.render import PygameSurface
from paddle_shooter.scheduler import Scheduler
from paddle_shooter.settings import GameSettings
from paddle_shooter.utils import configure_logging, logger, set_screen
from paddle_shooter.world import World


class Game:
    """
    Game class
    """

    _carry_on = True

    def __init__(self, settings: GameSettings):
        """
        :param settings: Window and runtime settings
        :type settings: GameSettings
        """
        logger.debug(f"Initializing {settings.title}")
        self._settings = settings
        self._clock = pygame.time.Clock()
        pygame.init()

    def _set_screen(self, width: int, height: int) -> pygame.Surface:
        """
        Set the screen

        :param width: Width of the screen
        :type width: int

        :param height: Height of the screen
        :type height: int

        :return: pygame.Surface
        :rtype: pygame.Surface
        """

        logger.debug("Setting screen")

        return set_screen(self._settings.title, width, height)

    def handle_events(self):
        """
        Handle the events

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def handle_game_logic(self):
        """
        Handle the game logic

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def run(self):
        """
        Run the game
        """
        logger.info(f"Running {self._settings.title}")

        while self._carry_on:
            self._clock.tick(self._settings.fps)
            self.handle_events()
            self.handle_game_logic()
            pygame.display.flip()

        pygame.quit()


class PaddleShooter(Game):
    """
    Paddle Shooter class
    """

    def __init__(self, settings: Optional[GameSettings] = None):
        super().__init__(settings or GameSettings())

        width, height = self._settings.width, self._settings.height
        self._screen = self._set_screen(width, height)

        self.scheduler = Scheduler()
        self.world = World(
            width,
            height,
            self.scheduler,
            rng=random.Random(self._settings.seed),
        )
        surface = PygameSurface(self._screen)
        logger.debug(f"Surface size: {surface.size}")
        self.loop = GameLoop(self.world, surface, self.scheduler)
        self.controller = InputController(self.loop)

    def handle_events(self):
        """
        Handle the events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    logger.debug("Quitting the game")
                    self._carry_on = False
                    continue
                self.controller.key_down(event.key)
                self.controller.key_press(event.key)
            elif event.type == pygame.KEYUP:
                self.controller.key_up(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.controller.click()

    def handle_game_logic(self):
        """
        Fire due timers, then run the pending frame
        """
        self.scheduler.run_due_timers()
        if self.scheduler.frame_pending():
            self.scheduler.run_frame()

    def run(self):
        """
        Start the loop and run until the window is closed
        """
        self.loop.start()
        super().run()
        logger.debug(f"Stopped with {self.scheduler.pending_timers} pending timers")


def parse_args(argv: Optional[List[str]] = None) -> GameSettings:
    """
    Build settings from command line arguments

    :param argv: Arguments, defaults to ``sys.argv[1:]``
    :type argv: list

    :return: GameSettings
    """
    defaults = GameSettings()
    parser = argparse.ArgumentParser(description=defaults.title)
    parser.add_argument("--width", type=int, default=defaults.width, help="Window width")
    parser.add_argument("--height", type=int, default=defaults.height, help="Window height")
    parser.add_argument("--fps", type=int, default=defaults.fps, help="Frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for spawns")
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args(argv)

    try:
        return GameSettings.from_dict(
            {
                "window": {"width": args.width, "height": args.height},
                "game": {"fps": args.fps, "seed": args.seed},
                "logging": {"level": args.log_level},
            }
        )
    except ValueError as error:
        parser.error(str(error))


def main(argv: Optional[List[str]] = None) -> None:
    settings = parse_args(argv)
    configure_logging(settings.log_level)
    logger.info(settings.to_dict())

    game = PaddleShooter(settings)
    game.run()


if __name__ == "__main__":
    main()
