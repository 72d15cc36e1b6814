"""
Impulse: one user-triggered expanding wave source.

An impulse is born at a point, drifts with a constant-magnitude velocity that
reflects off the surface edges, and ages by a fixed simulated tick duration
until it expires. Its ring radius and fade are functions of age only.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, Optional

from halftone.core.color import Palette


@dataclass
class ImpulseConfig:
    """Creation constants for impulses."""

    lifetime: float = 2.0  # Seconds of simulated time before expiry
    velocity: tuple[float, float] = (3.0, 2.0)  # Surface units per tick
    dt: float = 0.016  # Simulated seconds per tick (60 Hz)

    # Fixed components of randomly generated rainbow colors
    saturation: float = 100.0
    lightness: float = 50.0

    def __post_init__(self):
        if self.lifetime <= 0:
            raise ValueError(f"lifetime must be positive, got {self.lifetime}")
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        self.velocity = (float(self.velocity[0]), float(self.velocity[1]))


@dataclass
class Impulse:
    """
    A single wave source.

    origin and velocity change every tick; lifetime and palette never do.
    palette is None for impulses created in default mode.
    """

    x: float
    y: float
    lifetime: float = 2.0
    vx: float = 3.0
    vy: float = 2.0
    age: float = 0.0
    palette: Optional[Palette] = None

    # Monotonic id assigned by the pool, used only for logging
    impulse_id: int = field(default=0, compare=False)

    def __post_init__(self):
        if self.lifetime <= 0:
            raise ValueError(f"lifetime must be positive, got {self.lifetime}")

    @property
    def origin(self) -> tuple[float, float]:
        """Current position (x, y) in surface coordinates."""
        return self.x, self.y

    @property
    def velocity(self) -> tuple[float, float]:
        """Current signed velocity (vx, vy) in units per tick."""
        return self.vx, self.vy

    @property
    def expired(self) -> bool:
        return self.age >= self.lifetime

    @property
    def fade_out(self) -> float:
        """Linear decay from 1 at birth to 0 at expiry."""
        return 1.0 - self.age / self.lifetime


WaveMode = Literal["default", "rainbow"]
WAVE_MODES: tuple[str, ...] = ("default", "rainbow")


def check_mode(mode: str) -> str:
    """Return mode unchanged if it is a known wave mode, else raise."""
    if mode not in WAVE_MODES:
        raise ValueError(f"Unknown mode: {mode}")
    return mode
