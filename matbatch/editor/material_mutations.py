"""
Каталог мутаций материалов для пакетного редактирования.

Каждая мутация - маленькое замыкание (asset) -> None.
Ассет без main_pass молча пропускается: это не ошибка.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from matbatch.assets.material_pass import BlendMode, make_color_mask
from matbatch.assets.project_asset import ProjectAsset

Mutator = Callable[[ProjectAsset], None]

DEPTH_WRITE_ON = "Depth Write On"
DEPTH_WRITE_OFF = "Depth Write Off"
TWO_SIDED_ON = "Two Sided On"
TWO_SIDED_OFF = "Two Sided Off"
VISIBILITY_ON = "Visibility On"
VISIBILITY_OFF = "Visibility Off"
BLEND_NORMAL = "Blend Normal"


def set_depth_write(flag: bool) -> Mutator:
    def mutate(asset: ProjectAsset) -> None:
        if asset.main_pass is not None:
            asset.main_pass.depth_write = flag
    return mutate


def set_two_sided(flag: bool) -> Mutator:
    def mutate(asset: ProjectAsset) -> None:
        if asset.main_pass is not None:
            asset.main_pass.two_sided = flag
    return mutate


def set_visibility(flag: bool) -> Mutator:
    """Все 4 канала color mask в flag."""
    def mutate(asset: ProjectAsset) -> None:
        if asset.main_pass is not None:
            asset.main_pass.color_mask = make_color_mask(flag, flag, flag, flag)
    return mutate


def set_blend_mode(mode: BlendMode) -> Mutator:
    mode = BlendMode(mode)

    def mutate(asset: ProjectAsset) -> None:
        if asset.main_pass is not None:
            asset.main_pass.blend_mode = mode
    return mutate


MUTATIONS: Dict[str, Mutator] = {
    DEPTH_WRITE_ON: set_depth_write(True),
    DEPTH_WRITE_OFF: set_depth_write(False),
    TWO_SIDED_ON: set_two_sided(True),
    TWO_SIDED_OFF: set_two_sided(False),
    VISIBILITY_ON: set_visibility(True),
    VISIBILITY_OFF: set_visibility(False),
    BLEND_NORMAL: set_blend_mode(BlendMode.NORMAL),
}

# Раскладка кнопок панели: (заголовок группы, [(текст кнопки, имя мутации), ...])
MUTATION_GROUPS: List[Tuple[str, List[Tuple[str, str]]]] = [
    ("Depth Write", [("Enable", DEPTH_WRITE_ON), ("Disable", DEPTH_WRITE_OFF)]),
    ("Two Sided", [("Enable", TWO_SIDED_ON), ("Disable", TWO_SIDED_OFF)]),
    ("Material Visibility", [("Show", VISIBILITY_ON), ("Hide", VISIBILITY_OFF)]),
    ("Blend Mode", [("Set Blend: Normal", BLEND_NORMAL)]),
]
