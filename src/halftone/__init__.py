"""
halftone: interactive halftone wave simulator

Clicks spawn impulses that expand as rings across a grid of dots. Each dot's
size, opacity and color follow its distance from the nearest live wave front.

Core concepts:
- Impulse: a wave source that drifts, reflects off the edges and fades out
- Field: per-cell strength = ring proximity × fade-out
- Frame: one tick of rendering, then advancing the pool

The engine emits draw primitives; painting them is left to the host
(halftone.viz provides a numpy rasterizer and matplotlib helpers).
"""

__version__ = "0.1.0"
