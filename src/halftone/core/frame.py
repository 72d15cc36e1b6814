"""
FrameDriver: one tick of the halftone simulation.

Each tick:
1. Reset the background to opaque black (no trails between frames)
2. Evaluate every grid cell against the pool, row-major
3. Advance, then prune, the pool

Rendering always sees the pool as the previous tick left it. The pool is
only written after the frame's primitives have been produced.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from halftone.core.color import RGBA, BLACK
from halftone.core.field import DrawPrimitive, FieldConfig, GridField, evaluate_grid, grid_shape
from halftone.core.pool import ImpulsePool

logger = logging.getLogger("halftone")


@dataclass
class Frame:
    """Everything the rasterizer needs to paint one tick."""

    width: int
    height: int
    rows: int
    cols: int
    primitives: list[DrawPrimitive] = field(default_factory=list)
    background: RGBA = BLACK
    tick: int = 0


@dataclass
class FrameDriver:
    """
    Turns the impulse pool into draw primitives, one tick at a time.

    The grid is recomputed from the surface size on every tick, so resizes
    take effect on the next call without any cache to invalidate.
    """

    pool: ImpulsePool
    config: FieldConfig = field(default_factory=FieldConfig)

    current_tick: int = field(default=0, init=False)

    def evaluate(self, width: int, height: int) -> GridField:
        """Evaluate the field for the current pool without mutating it."""
        rows, cols = grid_shape(width, height, self.config.cell_size)
        return evaluate_grid(rows, cols, self.pool, self.config)

    def tick(self, width: int, height: int) -> Frame:
        """
        Render one frame, then advance and prune the pool.

        Args:
            width, height: Surface size for this whole tick

        Returns:
            Frame with primitives in row-major order
        """
        grid = self.evaluate(width, height)
        rows, cols = grid.shape
        frame = Frame(
            width=width,
            height=height,
            rows=rows,
            cols=cols,
            primitives=grid.primitives(),
            tick=self.current_tick,
        )

        self.pool.advance(width, height)
        self.pool.prune()

        if self.current_tick % 60 == 0:
            logger.debug(
                f"Tick={self.current_tick}, Grid={rows}x{cols}, "
                f"Primitives={len(frame.primitives)}, Pool={len(self.pool)}"
            )
        self.current_tick += 1
        return frame
