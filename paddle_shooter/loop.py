"""
Per-frame game loop
"""

from paddle_shooter.constants import BACKGROUND, BLINK_WINDOW, TEXT_COLOR
from paddle_shooter.render import HINT_FONT, HUD_FONT, TITLE_FONT
from paddle_shooter.utils import GameInitError, logger
from paddle_shooter.world import World

SURFACE_OPERATIONS = ("clear_rect", "fill_rect", "fill_text", "measure_text_width")


class GameLoop:
    """
    Advances the world one tick per frame and draws it
    """

    def __init__(self, world: World, surface, scheduler):
        """
        :param world: Session to run
        :type world: World

        :param surface: Render surface

        :param scheduler: Provides ``request_frame(callback)``

        :raise GameInitError: If the surface or the scheduler is missing
        """
        if surface is None or not all(
            callable(getattr(surface, name, None)) for name in SURFACE_OPERATIONS
        ):
            raise GameInitError("Game loop needs a render surface")
        if scheduler is None or not callable(getattr(scheduler, "request_frame", None)):
            raise GameInitError("Game loop needs a frame scheduler")

        self.world = world
        self.surface = surface
        self.scheduler = scheduler

    def start(self) -> None:
        logger.debug("Requesting frame")
        self.scheduler.request_frame(self.tick)

    def tick(self) -> None:
        """
        Run one frame. Does nothing, and stops the loop, while paused.
        """
        world = self.world
        if world.paused:
            return

        self.clear()

        for index in world.enemies.snapshot():
            enemy = world.enemies.get(index)
            if enemy is None:
                continue
            enemy.draw(self.surface)
            enemy.update(world)
            if enemy.alive and world.frame % enemy.shooting_speed == 0:
                enemy.shoot(world)

        self._draw_and_update(world.enemy_bullets)
        self._draw_and_update(world.bullets)

        player = world.player
        if not player.invincible or (world.frame // BLINK_WINDOW) % 2 == 0:
            player.draw(self.surface)

        for index in world.particles.snapshot():
            particle = world.particles.get(index)
            if particle is not None:
                particle.tick(world, self.surface)

        player.update(world)

        if world.game_over:
            self.draw_game_over()
            self.draw_score()
            return

        self.draw_score()
        world.frame += 1
        self.scheduler.request_frame(self.tick)

    def _draw_and_update(self, store) -> None:
        for index in store.snapshot():
            entity = store.get(index)
            if entity is None:
                continue
            entity.draw(self.surface)
            entity.update(self.world)

    def clear(self) -> None:
        self.surface.clear_rect((0, 0, self.world.width, self.world.height), BACKGROUND)

    def draw_score(self) -> None:
        """
        Draw the score and the remaining lives
        """
        self.surface.fill_text(f"Score: {self.world.score}", 8, 20, HUD_FONT, TEXT_COLOR)
        self.surface.fill_text(f"Lives: {self.world.lives}", 8, 40, HUD_FONT, TEXT_COLOR)

    def _centered_text(self, text: str, y: float, font) -> None:
        x = self.world.width / 2 - self.surface.measure_text_width(text, font) / 2
        self.surface.fill_text(text, x, y, font, TEXT_COLOR)

    def draw_game_over(self) -> None:
        """
        Draw the game over screen
        """
        self.clear()
        middle = self.world.height / 2
        self._centered_text("Game Over", middle - 50, TITLE_FONT)
        self._centered_text(f"Score: {self.world.score}", middle - 5, TITLE_FONT)
        self._centered_text("Click or press Spacebar to Play Again", middle + 30, HINT_FONT)
