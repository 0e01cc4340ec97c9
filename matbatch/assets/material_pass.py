from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np


class BlendMode(IntEnum):
    NORMAL = 0
    MULTIPLY = 1
    ADD = 2
    SCREEN = 3
    PREMULTIPLIED_ALPHA = 4
    ALPHA_TO_COVERAGE = 5
    DISABLED = 6


def make_color_mask(r: bool = True, g: bool = True, b: bool = True, a: bool = True) -> np.ndarray:
    """4-канальная маска цвета (RGBA)."""
    return np.array([r, g, b, a], dtype=np.bool_)


@dataclass
class MaterialPass:
    """
    Основной проход рендеринга материала.

    Полное состояние, никаких "None": отсутствие прохода
    выражается на уровне ассета (main_pass is None), а не полями.
    """
    depth_write: bool = True
    two_sided: bool = False
    color_mask: np.ndarray = field(default_factory=make_color_mask)
    blend_mode: BlendMode = BlendMode.NORMAL

    def __post_init__(self):
        self.color_mask = np.asarray(self.color_mask, dtype=np.bool_)
        if self.color_mask.shape != (4,):
            raise ValueError(f"color_mask must have 4 channels, got shape {self.color_mask.shape}")
        self.blend_mode = BlendMode(self.blend_mode)

    @property
    def is_visible(self) -> bool:
        """Хотя бы один канал цвета пишется."""
        return bool(self.color_mask.any())

    def serialize(self) -> dict:
        return {
            "depth_write": self.depth_write,
            "two_sided": self.two_sided,
            "color_mask": [bool(c) for c in self.color_mask],
            "blend_mode": int(self.blend_mode),
        }
