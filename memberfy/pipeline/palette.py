# memberfy/pipeline/palette.py
from __future__ import annotations
from io import BytesIO
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError
from sklearn.cluster import KMeans

from .types import RGB, Palette


class ImageDecodeError(ValueError):
    pass


def _round_half_up(x: np.ndarray) -> np.ndarray:
    # np.round — банковское округление, нам нужно "как Math.round"
    return np.floor(x + 0.5)

def decode_rgb(data: bytes, size: Optional[Tuple[int, int]] = None) -> np.ndarray:
    """
    Байты картинки -> массив (H, W, 3) uint8 в RGB.
    size=(w, h) — пикселизация: обрезаем по центру под пропорции size и ужимаем.
    """
    if not data:
        raise ImageDecodeError("empty image data")
    try:
        with Image.open(BytesIO(data)) as im:
            img = im.convert("RGB")
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"cannot decode image: {e}") from e

    if size is not None:
        # cover: центрированный квадрат, потом ужимаем (без растягивания)
        img = ImageOps.fit(img, size, Image.LANCZOS)
    return np.asarray(img, dtype=np.uint8)

def cell_color(pixels: np.ndarray, method: str = "mean") -> RGB:
    """
    Один цвет на клетку:
    - mean: среднее по каналам
    - kmeans: центр единственного кластера KMeans
    Пустая клетка (картинка меньше сетки) -> (0, 0, 0).
    """
    X = pixels.reshape(-1, 3).astype(np.float64)
    if X.shape[0] == 0:
        return (0, 0, 0)

    if method == "kmeans":
        km = KMeans(n_clusters=1, n_init=1, random_state=42)
        km.fit(X)
        center = km.cluster_centers_[0]
    elif method == "mean":
        center = X.mean(axis=0)
    else:
        raise ValueError(f"unknown palette method: {method}")

    r, g, b = [int(v) for v in _round_half_up(np.clip(center, 0, 255))]
    return (r, g, b)

def grid_palette(rgb: np.ndarray, grid_x: int, grid_y: int, method: str = "mean") -> Palette:
    """
    Делим картинку на grid_x * grid_y клеток (целочисленное деление,
    остаток справа/снизу отбрасываем) и берём по цвету на клетку.
    Порядок — построчно: индекс = x + y * grid_x.
    """
    h, w = rgb.shape[:2]
    cell_w = w // grid_x
    cell_h = h // grid_y

    palette: Palette = []
    for y in range(grid_y):
        for x in range(grid_x):
            x0, y0 = x * cell_w, y * cell_h
            cell = rgb[y0:y0 + cell_h, x0:x0 + cell_w, :3]
            palette.append(cell_color(cell, method))
    return palette
