"""
Visualization utilities.

- numpy rasterizer for frames (canvas stand-in)
- matplotlib frame views and strength heatmaps
"""

from halftone.viz.raster import new_canvas, draw_circle, draw_primitives, rasterize
from halftone.viz.plots import plot_frame, plot_frames, plot_strength, save_figure

__all__ = [
    "new_canvas",
    "draw_circle",
    "draw_primitives",
    "rasterize",
    "plot_frame",
    "plot_frames",
    "plot_strength",
    "save_figure",
]
