# memberfy/pipeline/recolor.py
from __future__ import annotations
from typing import List, Sequence

from .types import RGB, Palette
from .variants import Variant

PLACEHOLDER = "COLOR"

# ---- Цвет плашки по "возрасту" аккаунта ----
def fid_badge_color(fid: int | str) -> str:
    try:
        n = int(fid)
    except (TypeError, ValueError):
        return "white"
    if n < 1000:
        return "gold"
    if n < 10000:
        return "#855DCD"
    if n < 20000:
        return "#94E337"
    return "white"

def rgb_string(color: Sequence[int]) -> str:
    r, g, b = color
    return f"rgb({r}, {g}, {b})"

def construct_svg(palette: Palette, indices: List[int], variant: Variant, fid: int | str) -> str:
    """
    Подставляет цвета палитры в фрагменты шаблона:
    фрагмент i берёт palette[indices[i]] (первый COLOR в строке).
    Фрагменты без индекса или с индексом вне палитры остаются как есть.
    """
    parts: List[str] = [variant.header]

    if variant.background:
        bg = rgb_string(palette[0]) if palette else "rgb(255, 255, 255)"
        parts.append(variant.background.format(color=bg))
    if variant.badge:
        parts.append(variant.badge.format(color=fid_badge_color(fid)))

    for i, fragment in enumerate(variant.fragments):
        if i < len(indices) and 0 <= indices[i] < len(palette):
            color: RGB = palette[indices[i]]
            fragment = fragment.replace(PLACEHOLDER, rgb_string(color), 1)
        parts.append(fragment)

    parts.append(variant.footer)
    return "".join(parts)
