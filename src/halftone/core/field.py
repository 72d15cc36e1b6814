"""
Field evaluation: wave strength per grid cell.

For each (cell, impulse) pair:

    distance       = |cell - origin|
    ring_radius    = age * progress_rate * ring_speed
    ring_proximity = max(0, 1 - |distance - ring_radius| / ring_width)
    fade_out       = 1 - age / lifetime
    strength       = ring_proximity * fade_out

Contributions are NOT summed. Impulses are visited in pool order and each one
with positive strength replaces the cell's candidate ("last" policy). The
"max" policy keeps the strongest contribution instead, later impulses winning ties.

Two evaluators share these rules:
- evaluate_cell: one cell, plain floats
- evaluate_grid: the whole grid at once with numpy
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, Literal, Optional

import numpy as np

from halftone.core.color import RGBA, WHITE, hsl_to_rgb_array, interpolate_hsl
from halftone.core.impulse import Impulse


COMBINE_POLICIES = ("last", "max")


@dataclass
class FieldConfig:
    """Constants of the halftone field."""

    cell_size: float = 20.0  # Grid pitch in surface units
    progress_rate: float = 2.0  # waveProgress = age * progress_rate
    ring_speed: float = 500.0  # ring_radius = waveProgress * ring_speed
    ring_width: float = 200.0  # Half-width of the triangular falloff
    dot_scale: float = 0.8  # Dot diameter at full strength, as a fraction of cell_size
    alpha_scale: float = 0.5  # alpha = strength * alpha_scale
    combine: Literal["last", "max"] = "last"

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.ring_width <= 0:
            raise ValueError(f"ring_width must be positive, got {self.ring_width}")
        if self.combine not in COMBINE_POLICIES:
            raise ValueError(f"Unknown combine policy: {self.combine}")


@dataclass(frozen=True)
class DrawPrimitive:
    """A filled circle for the rasterizer."""

    center: tuple[float, float]
    radius: float
    color: RGBA


@dataclass
class GridField:
    """
    Evaluated field over a rows x cols grid.

    strength is 0 where no impulse contributes. radius and rgba are only
    meaningful where strength > 0.
    """

    strength: np.ndarray  # [rows, cols]
    radius: np.ndarray  # [rows, cols]
    rgba: np.ndarray  # [rows, cols, 4]
    cell_size: float

    @property
    def shape(self) -> tuple[int, int]:
        return self.strength.shape

    @property
    def active(self) -> np.ndarray:
        """Mask of cells that produce a primitive."""
        return self.strength > 0

    def primitives(self) -> list[DrawPrimitive]:
        """Primitives for all active cells, in row-major order."""
        rows, cols = np.nonzero(self.active)
        out = []
        for row, col in zip(rows, cols):
            r, g, b, a = (float(c) for c in self.rgba[row, col])
            out.append(DrawPrimitive(
                center=(float(col * self.cell_size), float(row * self.cell_size)),
                radius=float(self.radius[row, col]),
                color=RGBA(r, g, b, a),
            ))
        return out


def grid_shape(width: float, height: float, cell_size: float) -> tuple[int, int]:
    """(rows, cols) covering the surface; empty for non-positive sizes."""
    rows = max(0, math.ceil(height / cell_size))
    cols = max(0, math.ceil(width / cell_size))
    return rows, cols


def ring_radius(age: float, config: FieldConfig) -> float:
    """Radius of an impulse's wave front at the given age."""
    return age * config.progress_rate * config.ring_speed


def ring_proximity(distance, radius: float, ring_width: float):
    """Triangular falloff: 1 on the front, 0 beyond ±ring_width from it."""
    return np.maximum(0.0, 1.0 - np.abs(distance - radius) / ring_width)


def impulse_strength(distance: float, impulse: Impulse, config: FieldConfig) -> float:
    """Strength of one impulse at a point at the given distance from its origin."""
    proximity = float(ring_proximity(distance, ring_radius(impulse.age, config), config.ring_width))
    return proximity * impulse.fade_out


def dot_radius(strength, config: FieldConfig):
    """Dot radius for a strength value (capped at full size)."""
    return config.cell_size * np.minimum(strength, 1.0) * config.dot_scale / 2.0


def impulse_color(impulse: Impulse, distance: float, strength: float, config: FieldConfig) -> RGBA:
    """
    Color of an impulse's contribution.

    White without a palette. With one, the hue runs from start to end as
    t = distance / (ring_radius + ring_width) goes from 0 to 1. t is not
    clamped, so cells past the ring extrapolate.
    """
    alpha = strength * config.alpha_scale
    if impulse.palette is None:
        return RGBA(WHITE.r, WHITE.g, WHITE.b, alpha)

    t = distance / (ring_radius(impulse.age, config) + config.ring_width)
    hsl = interpolate_hsl(impulse.palette.start, impulse.palette.end, t)
    return hsl.to_rgba(alpha)


def evaluate_cell(
    cx: float,
    cy: float,
    impulses: Iterable[Impulse],
    config: FieldConfig,
) -> Optional[DrawPrimitive]:
    """
    Evaluate one cell against every impulse.

    Returns:
        The winning primitive, or None if no impulse has positive strength here
    """
    best: Optional[tuple[Impulse, float, float]] = None

    for imp in impulses:
        distance = math.sqrt((cx - imp.x) ** 2 + (cy - imp.y) ** 2)
        strength = impulse_strength(distance, imp, config)
        if strength <= 0:
            continue
        if config.combine == "max" and best is not None and strength < best[2]:
            continue
        best = (imp, distance, strength)

    if best is None:
        return None

    imp, distance, strength = best
    return DrawPrimitive(
        center=(cx, cy),
        radius=float(dot_radius(strength, config)),
        color=impulse_color(imp, distance, strength, config),
    )


def evaluate_grid(
    rows: int,
    cols: int,
    impulses: Iterable[Impulse],
    config: FieldConfig,
) -> GridField:
    """
    Evaluate every cell of a rows x cols grid.

    Cell (row, col) sits at (col * cell_size, row * cell_size). Results match
    evaluate_cell cell by cell.
    """
    cell = config.cell_size
    xx = (np.arange(cols, dtype=np.float64) * cell)[np.newaxis, :]
    yy = (np.arange(rows, dtype=np.float64) * cell)[:, np.newaxis]

    strength = np.zeros((rows, cols), dtype=np.float64)
    rgba = np.zeros((rows, cols, 4), dtype=np.float64)

    for imp in impulses:
        distance = np.sqrt((xx - imp.x) ** 2 + (yy - imp.y) ** 2)
        radius = ring_radius(imp.age, config)
        s = ring_proximity(distance, radius, config.ring_width) * imp.fade_out

        mask = s > 0
        if config.combine == "max":
            mask &= s >= strength
        if not mask.any():
            continue

        if imp.palette is None:
            rgb = np.ones((int(mask.sum()), 3), dtype=np.float64)
        else:
            t = distance[mask] / (radius + config.ring_width)
            hsl = interpolate_hsl(imp.palette.start, imp.palette.end, t)
            rgb = hsl_to_rgb_array(hsl.h, hsl.s, hsl.l)

        strength[mask] = s[mask]
        rgba[mask, :3] = rgb
        rgba[mask, 3] = s[mask] * config.alpha_scale

    return GridField(
        strength=strength,
        radius=dot_radius(strength, config),
        rgba=rgba,
        cell_size=cell,
    )
