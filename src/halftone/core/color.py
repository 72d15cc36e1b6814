"""
Color primitives for the halftone renderer.

- HSL: hue in degrees (unbounded, wraps mod 360), saturation and lightness in [0, 100]
- RGBA: channels in [0, 1]
- Palette: the (start, end) HSL pair an impulse carries in rainbow mode

Hue interpolation always takes the shortest arc around the color wheel,
so 350° → 10° passes through 0°, never through 180°.
"""

from __future__ import annotations
import colorsys
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class HSL:
    """A color in HSL space."""

    h: float  # Degrees, wraps mod 360
    s: float  # Percent
    l: float  # Percent

    def to_rgba(self, alpha: float = 1.0) -> "RGBA":
        """Convert to RGBA, clamping s and l like CSS hsla() does."""
        s = min(max(self.s, 0.0), 100.0) / 100.0
        l = min(max(self.l, 0.0), 100.0) / 100.0
        r, g, b = colorsys.hls_to_rgb((self.h % 360.0) / 360.0, l, s)
        return RGBA(r, g, b, alpha)


@dataclass(frozen=True)
class RGBA:
    """A color with alpha, all channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.r, self.g, self.b, self.a


WHITE = RGBA(1.0, 1.0, 1.0, 1.0)
BLACK = RGBA(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Palette:
    """Start and end colors of a rainbow impulse. Fixed at creation."""

    start: HSL
    end: HSL


def hue_delta(start_h: float, end_h: float) -> float:
    """Signed shortest-arc hue difference, in [-180, 180)."""
    return ((end_h - start_h + 540.0) % 360.0) - 180.0


def interpolate_hsl(start: HSL, end: HSL, t: float) -> HSL:
    """
    Interpolate between two HSL colors.

    t is not clamped: values past 1 extrapolate along the same arc.
    The returned hue is left unwrapped; wrapping happens on conversion.
    """
    return HSL(
        h=start.h + hue_delta(start.h, end.h) * t,
        s=start.s + (end.s - start.s) * t,
        l=start.l + (end.l - start.l) * t,
    )


def random_hsl(
    rng: np.random.Generator,
    saturation: float = 100.0,
    lightness: float = 50.0,
) -> HSL:
    """Random hue in [0, 360) with fixed saturation and lightness."""
    return HSL(h=float(rng.uniform(0.0, 360.0)), s=saturation, l=lightness)


def random_palette(
    rng: np.random.Generator,
    saturation: float = 100.0,
    lightness: float = 50.0,
) -> Palette:
    """Draw an independent random start and end color."""
    return Palette(
        start=random_hsl(rng, saturation, lightness),
        end=random_hsl(rng, saturation, lightness),
    )


def hsl_to_rgb_array(h: np.ndarray, s: np.ndarray, l: np.ndarray) -> np.ndarray:
    """
    Vectorized HSL to RGB conversion.

    Args:
        h: Hue array in degrees (any range)
        s: Saturation array in percent (clamped to [0, 100])
        l: Lightness array in percent (clamped to [0, 100])

    Returns:
        Float array with shape h.shape + (3,), channels in [0, 1]
    """
    h = np.mod(np.asarray(h, dtype=np.float64), 360.0) / 360.0
    s = np.clip(np.asarray(s, dtype=np.float64), 0.0, 100.0) / 100.0
    l = np.clip(np.asarray(l, dtype=np.float64), 0.0, 100.0) / 100.0

    # Chroma-based formulation: f(n) = l - a * max(-1, min(k - 3, 9 - k, 1))
    a = s * np.minimum(l, 1.0 - l)

    def channel(n: float) -> np.ndarray:
        k = np.mod(n + h * 12.0, 12.0)
        return l - a * np.clip(np.minimum(k - 3.0, 9.0 - k), -1.0, 1.0)

    return np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1)
