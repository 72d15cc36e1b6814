"""
Rasterize frames into RGB images with numpy.

Stands in for a canvas: the background is painted first, then every
primitive is composited "source over" in emission order. A pixel belongs to
a dot when its center lies within the dot's radius.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from halftone.core.color import RGBA
    from halftone.core.field import DrawPrimitive
    from halftone.core.frame import Frame


def new_canvas(width: int, height: int, background: "RGBA") -> np.ndarray:
    """Opaque canvas of shape [height, width, 3] filled with background."""
    canvas = np.empty((max(0, height), max(0, width), 3), dtype=np.float64)
    canvas[...] = (background.r, background.g, background.b)
    return canvas


def draw_circle(canvas: np.ndarray, center: tuple[float, float], radius: float, color: "RGBA"):
    """Alpha-blend a filled circle onto canvas in place."""
    height, width = canvas.shape[:2]
    cx, cy = center
    if radius <= 0 or color.a <= 0:
        return

    # Clip the bounding box to the canvas
    x0 = max(0, int(np.floor(cx - radius)))
    x1 = min(width, int(np.ceil(cx + radius)) + 1)
    y0 = max(0, int(np.floor(cy - radius)))
    y1 = min(height, int(np.ceil(cy + radius)) + 1)
    if x0 >= x1 or y0 >= y1:
        return

    yy, xx = np.ogrid[y0:y1, x0:x1]
    inside = (xx + 0.5 - cx) ** 2 + (yy + 0.5 - cy) ** 2 <= radius ** 2

    alpha = min(max(color.a, 0.0), 1.0)
    src = np.array([color.r, color.g, color.b], dtype=np.float64)
    region = canvas[y0:y1, x0:x1]
    region[inside] = src * alpha + region[inside] * (1.0 - alpha)


def draw_primitives(canvas: np.ndarray, primitives: Iterable["DrawPrimitive"]) -> np.ndarray:
    """Paint primitives onto canvas in order. Returns the same array."""
    for prim in primitives:
        draw_circle(canvas, prim.center, prim.radius, prim.color)
    return canvas


def rasterize(frame: "Frame") -> np.ndarray:
    """
    Paint a whole frame.

    Returns:
        Float image [height, width, 3] with channels in [0, 1]
    """
    canvas = new_canvas(frame.width, frame.height, frame.background)
    return draw_primitives(canvas, frame.primitives)
