"""
Render surface backed by pygame
"""

from typing import Dict, NamedTuple, Tuple

import pygame

from paddle_shooter.utils import logger


class Font(NamedTuple):
    """
    Font description, resolved to a system font on first use
    """

    size: int
    bold: bool = False


HUD_FONT = Font(16)
TITLE_FONT = Font(30, bold=True)
HINT_FONT = Font(16, bold=True)

FONT_NAMES = "lato,dejavusans,arial,sans"


class PygameSurface:
    """
    Draw calls used by the game loop and the entities
    """

    def __init__(self, screen: pygame.Surface):
        """
        :param screen: Surface to draw on
        :type screen: pygame.Surface
        """
        self._screen = screen
        self._fonts: Dict[Font, pygame.font.Font] = {}

    @property
    def size(self) -> Tuple[int, int]:
        """
        Size of the underlying screen

        :rtype: tuple
        """
        return self._screen.get_size()

    def _font(self, font: Font) -> pygame.font.Font:
        if font not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            logger.debug(f"Loading font {font}")
            self._fonts[font] = pygame.font.SysFont(FONT_NAMES, font.size, bold=font.bold)
        return self._fonts[font]

    def clear_rect(self, rect, color) -> None:
        """
        Fill ``rect`` with ``color``. A translucent color blends with what is
        already there, leaving short trails behind moving entities.

        :param rect: ``(x, y, width, height)``
        :param color: Anything :class:`pygame.Color` accepts
        """
        color = pygame.Color(*color) if isinstance(color, tuple) else pygame.Color(color)
        rect = pygame.Rect(rect)
        if color.a == 255:
            self._screen.fill(color, rect)
            return

        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(color)
        self._screen.blit(overlay, rect.topleft)

    def fill_rect(self, x: float, y: float, width: float, height: float, color) -> None:
        """
        Fill a rectangle. Rectangles smaller than a pixel are skipped.

        :param x: Left edge
        :type x: float

        :param y: Top edge
        :type y: float

        :param width: Width
        :type width: float

        :param height: Height
        :type height: float

        :param color: Anything :class:`pygame.Color` accepts
        """
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        if rect.width > 0 and rect.height > 0:
            pygame.draw.rect(self._screen, color, rect)

    def fill_text(self, text: str, x: float, y: float, font: Font, color) -> None:
        """
        Draw ``text`` with its baseline at ``y``
        """
        rendered = self._font(font)
        image = rendered.render(text, True, color)
        self._screen.blit(image, (round(x), round(y) - rendered.get_ascent()))

    def measure_text_width(self, text: str, font: Font) -> int:
        """
        Width in pixels of ``text`` drawn with ``font``

        :param text: Text to measure
        :type text: str

        :param font: Font description
        :type font: Font

        :rtype: int
        """
        return self._font(font).size(text)[0]
