"""
Game settings
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from paddle_shooter.constants import FPS, HEIGHT, TITLE, WIDTH

_SECTIONS = {
    "window": ("width", "height", "title"),
    "game": ("fps", "seed"),
    "logging": ("level",),
}


@dataclass
class GameSettings:
    """
    Runtime settings for one game window
    """

    width: int = WIDTH
    height: int = HEIGHT
    fps: int = FPS
    title: str = TITLE
    seed: int | None = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Window size must be positive: {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"FPS must be positive: {self.fps}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSettings:
        """
        Build settings from a nested dictionary

        :param data: ``{"window": {...}, "game": {...}, "logging": {...}}``
        :type data: dict

        :raise ValueError: On unknown sections or keys

        :return: GameSettings
        """
        kwargs: dict[str, Any] = {}
        for section, values in data.items():
            if section not in _SECTIONS:
                raise ValueError(f"Unknown settings section: {section}")
            for key, value in values.items():
                if key not in _SECTIONS[section]:
                    raise ValueError(f"Unknown setting: {section}.{key}")
                kwargs["log_level" if section == "logging" else key] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """
        Inverse of :meth:`from_dict`
        """
        flat = asdict(self)
        return {
            "window": {key: flat[key] for key in _SECTIONS["window"]},
            "game": {key: flat[key] for key in _SECTIONS["game"]},
            "logging": {"level": flat["log_level"]},
        }
