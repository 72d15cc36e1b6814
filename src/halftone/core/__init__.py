"""
Core engine.

Pure in-memory simulation, no drawing:
- ImpulsePool: live impulses, insert / advance / prune
- evaluate_cell / evaluate_grid: wave strength and color per grid cell
- FrameDriver: one tick = evaluate, emit primitives, advance, prune
- HalftoneSimulation: owned state with on_impulse / on_resize / set_mode / tick
"""

from halftone.core.color import HSL, RGBA, Palette, interpolate_hsl, random_palette
from halftone.core.impulse import Impulse, ImpulseConfig, WaveMode
from halftone.core.pool import ImpulsePool
from halftone.core.field import (
    FieldConfig,
    DrawPrimitive,
    GridField,
    evaluate_cell,
    evaluate_grid,
    grid_shape,
)
from halftone.core.frame import Frame, FrameDriver
from halftone.core.config import SimulationConfig, LoggingConfig, load_config
from halftone.core.simulation import HalftoneSimulation

__all__ = [
    "HSL",
    "RGBA",
    "Palette",
    "interpolate_hsl",
    "random_palette",
    "Impulse",
    "ImpulseConfig",
    "WaveMode",
    "ImpulsePool",
    "FieldConfig",
    "DrawPrimitive",
    "GridField",
    "evaluate_cell",
    "evaluate_grid",
    "grid_shape",
    "Frame",
    "FrameDriver",
    "SimulationConfig",
    "LoggingConfig",
    "load_config",
    "HalftoneSimulation",
]
