# -*- coding: utf-8 -*-
"""
Кадровый буфер: упакованный RGB (0xRRGGBB, uint32, row‑major, начало
в левом верхнем углу) + буфер глубины той же формы.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from swrast3d.color import Color
from swrast3d.utils.logger import logger

DEPTH_CLEAR = 1.0e30

ColorLike = Union[Color, int]


def _packed(color: ColorLike) -> int:
    return color.to_hex() if isinstance(color, Color) else int(color) & 0xFFFFFF


class Framebuffer:
    def __init__(self, width: int, height: int, background: ColorLike = 0x000000):
        self.width = int(width)
        self.height = int(height)
        self.background_color = _packed(background)
        self.current_color = 0xFFFFFF
        self.colors = np.full((self.height, self.width), self.background_color, dtype=np.uint32)
        self.depth = np.full((self.height, self.width), DEPTH_CLEAR, dtype=np.float64)

    # -----------------------------------------------------------------
    def clear(self):
        self.colors.fill(self.background_color)
        self.depth.fill(DEPTH_CLEAR)

    def set_background_color(self, color: ColorLike):
        self.background_color = _packed(color)

    def set_current_color(self, color: ColorLike):
        self.current_color = _packed(color)

    # -----------------------------------------------------------------
    def point(self, x: int, y: int, depth: float, color: ColorLike = None) -> bool:
        """
        Depth‑тест и запись. Цвет можно передать явно; без него берётся
        current_color. Возвращает True, если пиксель записан.
        """
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return False
        if not depth < self.depth[y, x]:
            return False
        self.colors[y, x] = self.current_color if color is None else _packed(color)
        self.depth[y, x] = depth
        return True

    def get_pixel(self, x: int, y: int) -> int:
        return int(self.colors[y, x])

    def get_depth(self, x: int, y: int) -> float:
        return float(self.depth[y, x])

    # -----------------------------------------------------------------
    # вывод
    # -----------------------------------------------------------------
    @property
    def buffer(self) -> np.ndarray:
        """Плоский row‑major массив упакованных пикселей (для презентации)."""
        return self.colors.reshape(-1)

    def to_rgb_array(self) -> np.ndarray:
        """(H, W, 3) uint8."""
        rgb = np.empty((self.height, self.width, 3), dtype=np.uint8)
        rgb[..., 0] = (self.colors >> 16) & 0xFF
        rgb[..., 1] = (self.colors >> 8) & 0xFF
        rgb[..., 2] = self.colors & 0xFF
        return rgb

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_rgb_array())

    def save(self, path: str) -> Path:
        """Снимок кадра в файл (формат по расширению, через Pillow)."""
        p = Path(path).expanduser().resolve()
        p.parent.mkdir(parents=True, exist_ok=True)
        self.to_image().save(p)
        logger.info(f"[Framebuffer] Saved snapshot {p} ({self.width}x{self.height})")
        return p
