"""
matplotlib views of rendered frames.

Images are shown in surface coordinates: origin at the top left, y down.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from halftone.viz.raster import rasterize

if TYPE_CHECKING:
    from halftone.core.frame import Frame
    from halftone.core.field import GridField


def plot_frame(
    frame: "Frame",
    title: str = "",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 6),
) -> tuple[Figure, Axes]:
    """
    Show one rasterized frame.

    Args:
        frame: Frame returned by a tick
        title: Plot title (defaults to the tick number)
        ax: Existing axes to plot on (creates new figure if None)
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(rasterize(frame), origin="upper", interpolation="nearest")
    ax.set_title(title or f"Tick {frame.tick}")
    ax.set_axis_off()

    return fig, ax


def plot_frames(
    frames: Sequence["Frame"],
    ncols: int = 4,
    figsize_per_frame: tuple[float, float] = (3, 3),
) -> Figure:
    """Grid of frames, e.g. a sampled sequence of ticks."""
    n = len(frames)
    ncols = max(1, min(ncols, n))
    nrows = max(1, int(np.ceil(n / ncols)))
    fig, axes = plt.subplots(
        nrows, ncols,
        figsize=(figsize_per_frame[0] * ncols, figsize_per_frame[1] * nrows),
        squeeze=False,
    )

    for ax in axes.flat:
        ax.set_axis_off()
    for frame, ax in zip(frames, axes.flat):
        plot_frame(frame, ax=ax)

    fig.tight_layout()
    return fig


def plot_strength(
    grid: "GridField",
    title: str = "Wave Strength",
    ax: Axes | None = None,
    colorbar: bool = True,
    figsize: tuple[float, float] = (8, 6),
) -> tuple[Figure, Axes]:
    """Heatmap of the raw per-cell strength field."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    im = ax.imshow(grid.strength, origin="upper", cmap="magma", vmin=0, vmax=1, aspect="equal")
    if colorbar:
        plt.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    ax.set_title(title)
    ax.set_xlabel("col")
    ax.set_ylabel("row")

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file, creating the parent directory if needed."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
