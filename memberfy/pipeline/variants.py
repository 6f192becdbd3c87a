# memberfy/pipeline/variants.py
from __future__ import annotations
from dataclasses import dataclass
from types import ModuleType
from typing import Dict, List, Optional, Tuple

from .types import Cell, VariantOut
from .data import custom_hat, custom_member

@dataclass(frozen=True)
class Variant:
    """
    Один "хэндлер": сетка пикселизации + таблица координат + SVG-шаблон.
    Всё остальное (скачивание, палитра, растеризация) у вариантов общее.
    """
    name: str
    grid_x: int
    grid_y: int
    coordinates: Tuple[Cell, ...]
    header: str
    fragments: Tuple[str, ...]
    footer: str = "</svg>"
    downsample: Optional[Tuple[int, int]] = None
    method: str = "mean"              # "mean" | "kmeans"
    background: Optional[str] = None  # шаблон с {color}, красится palette[0]
    badge: Optional[str] = None       # шаблон с {color}, красится по tier'у fid


def path_color_indices(variant: Variant) -> List[int]:
    # x — колонка, y — строка (не как обычно)
    return [c.x + c.y * variant.grid_x for c in variant.coordinates]


def _from_module(name: str, mod: ModuleType, method: str) -> Variant:
    gx, gy = mod.GRID
    return Variant(
        name=name,
        grid_x=gx,
        grid_y=gy,
        coordinates=tuple(Cell(x=x, y=y) for x, y in mod.COORDINATES),
        header=mod.HEADER,
        fragments=tuple(mod.FRAGMENTS),
        footer=mod.FOOTER,
        downsample=getattr(mod, "DOWNSAMPLE", None),
        method=method,
        background=getattr(mod, "BACKGROUND", None),
        badge=getattr(mod, "BADGE", None),
    )


VARIANTS: Dict[str, Variant] = {
    v.name: v for v in (
        _from_module("custom_hat", custom_hat, method="mean"),
        _from_module("custom_member", custom_member, method="kmeans"),
    )
}


def get_variant(name: str) -> Optional[Variant]:
    return VARIANTS.get(name)


def describe(variant: Variant) -> VariantOut:
    return VariantOut(
        name=variant.name,
        grid=(variant.grid_x, variant.grid_y),
        downsample=variant.downsample,
        method=variant.method,
        fragments=len(variant.fragments),
    )
