"""
ImpulsePool: the set of active wave impulses.

The pool is the only mutable simulation state that survives between ticks.
It is mutated in exactly two ways:
- insert(): a new impulse from a point event
- advance() + prune(): once per tick, after the frame has been evaluated

Iteration order is insertion order. The field evaluator relies on it:
later impulses overwrite earlier ones at the same cell.
"""

from __future__ import annotations
import logging
from typing import Iterator, Optional

import numpy as np

from halftone.core.color import random_palette
from halftone.core.impulse import Impulse, ImpulseConfig, WaveMode, check_mode

logger = logging.getLogger("halftone")


def reflect_axis(position: float, velocity: float, limit: float) -> tuple[float, float]:
    """
    Move one coordinate by one tick and reflect at [0, limit].

    The tentative position is clamped into range. If it touches or passes
    either edge, the velocity component is negated for subsequent ticks.

    Returns:
        (new_position, new_velocity)
    """
    nxt = position + velocity
    if nxt <= 0:
        return 0.0, -velocity
    if nxt >= limit:
        return float(limit), -velocity
    return nxt, velocity


class ImpulsePool:
    """
    Owns all live impulses.

    No upper bound on size: the fixed lifetime keeps it small in practice.
    """

    def __init__(
        self,
        config: ImpulseConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.config = config if config is not None else ImpulseConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self._impulses: list[Impulse] = []
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._impulses)

    def __iter__(self) -> Iterator[Impulse]:
        return iter(self._impulses)

    def insert(self, x: float, y: float, mode: WaveMode = "default") -> Impulse:
        """
        Create an impulse at (x, y).

        Under rainbow mode the impulse gets a random palette, frozen for its
        whole life. Coordinates are not validated.
        """
        check_mode(mode)
        cfg = self.config

        palette = None
        if mode == "rainbow":
            palette = random_palette(self.rng, cfg.saturation, cfg.lightness)

        impulse = Impulse(
            x=float(x),
            y=float(y),
            lifetime=cfg.lifetime,
            vx=cfg.velocity[0],
            vy=cfg.velocity[1],
            palette=palette,
            impulse_id=self._next_id,
        )
        self._next_id += 1
        self._impulses.append(impulse)

        logger.debug(
            f"Impulse {impulse.impulse_id} inserted at ({impulse.x:.1f}, {impulse.y:.1f}), "
            f"mode={mode}, pool_size={len(self._impulses)}"
        )
        return impulse

    def advance(self, width: float, height: float, dt: Optional[float] = None):
        """
        Move every impulse one tick and age it by dt.

        All new states are computed first, then applied.
        """
        if dt is None:
            dt = self.config.dt

        updates = []
        for imp in self._impulses:
            x, vx = reflect_axis(imp.x, imp.vx, width)
            y, vy = reflect_axis(imp.y, imp.vy, height)
            updates.append((x, y, vx, vy, imp.age + dt))

        for imp, (x, y, vx, vy, age) in zip(self._impulses, updates):
            imp.x, imp.y = x, y
            imp.vx, imp.vy = vx, vy
            imp.age = age

    def prune(self) -> int:
        """
        Remove every impulse whose age has reached its lifetime.

        Returns:
            Number of impulses removed
        """
        alive = [imp for imp in self._impulses if not imp.expired]
        removed = len(self._impulses) - len(alive)
        if removed:
            logger.debug(f"Pruned {removed} expired impulse(s), {len(alive)} remaining")
        self._impulses = alive
        return removed

    def clear(self):
        """Drop all impulses (surface teardown)."""
        self._impulses.clear()
