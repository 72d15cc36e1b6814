"""
HalftoneSimulation: the owned state behind one halftone surface.

Hosts drive it through four inbound calls:
- on_impulse(x, y): a point event in surface coordinates
- on_resize(width, height): new surface size
- set_mode(mode): "default" or "rainbow", read when impulses are created
- tick(): render one frame and step the pool

Inbound calls may come from another thread than tick(). Impulses are queued
and drained at the start of the next tick, and the surface size is read once
per tick, so a tick never sees a half-applied event.
"""

from __future__ import annotations
import logging
import threading
from typing import Optional

import numpy as np

from halftone.core.config import SimulationConfig
from halftone.core.field import DrawPrimitive
from halftone.core.frame import Frame, FrameDriver
from halftone.core.impulse import WaveMode, check_mode
from halftone.core.pool import ImpulsePool

logger = logging.getLogger("halftone")


class HalftoneSimulation:
    """
    One independent halftone wave simulation.

    Several instances can coexist; nothing is shared between them.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config if config is not None else SimulationConfig()
        if rng is None:
            rng = np.random.default_rng(self.config.seed)

        self.pool = ImpulsePool(self.config.impulse, rng=rng)
        self.driver = FrameDriver(self.pool, self.config.grid)

        self._lock = threading.Lock()
        self._pending: list[tuple[float, float, WaveMode]] = []
        self._width = self.config.width
        self._height = self.config.height
        self._mode = self.config.mode

    @property
    def mode(self) -> WaveMode:
        return self._mode

    @property
    def size(self) -> tuple[int, int]:
        """Current surface size (width, height)."""
        with self._lock:
            return self._width, self._height

    @property
    def tick_count(self) -> int:
        return self.driver.current_tick

    def on_impulse(self, x: float, y: float):
        """
        Queue a new impulse at (x, y).

        The mode is captured now, not when the impulse is drained.
        """
        with self._lock:
            self._pending.append((float(x), float(y), self._mode))

    def on_resize(self, width: int, height: int):
        """Record a new surface size; negative sizes collapse to 0."""
        width, height = max(0, int(width)), max(0, int(height))
        with self._lock:
            self._width = width
            self._height = height
        logger.debug(f"Surface resized to {width}x{height}")

    def set_mode(self, mode: WaveMode):
        """Switch color mode. Existing impulses keep their colors."""
        check_mode(mode)
        with self._lock:
            if mode != self._mode:
                logger.info(f"Mode changed: {self._mode} -> {mode}")
            self._mode = mode

    def tick_frame(self) -> Frame:
        """Run one tick and return the full frame."""
        with self._lock:
            pending, self._pending = self._pending, []
            width, height = self._width, self._height

            for x, y, mode in pending:
                self.pool.insert(x, y, mode)

            return self.driver.tick(width, height)

    def tick(self) -> list[DrawPrimitive]:
        """Run one tick and return its primitives in row-major order."""
        return self.tick_frame().primitives

    def teardown(self):
        """Forget all impulses, live and pending."""
        with self._lock:
            self._pending.clear()
            self.pool.clear()
        logger.info("Simulation torn down")
