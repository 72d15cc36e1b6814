#!/usr/bin/env python3
"""
Demo: Interactive Halftone Waves

Opens a matplotlib window driven by FuncAnimation (~60 fps):
- Click anywhere to spawn a wave
- Press "m" to toggle between white and rainbow mode
- Press "c" to clear all waves
- Resize the window to resize the surface

Usage:
    python demo/demo_interactive.py [config.json]
"""

import sys

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from halftone.core import HalftoneSimulation, SimulationConfig, load_config
from halftone.logger_setup import setup_logging_from_config
from halftone.viz import rasterize


def main():
    config = load_config(sys.argv[1]) if len(sys.argv) > 1 else SimulationConfig()
    setup_logging_from_config(config.log)

    print("=" * 60)
    print("  HALFTONE WAVES")
    print("=" * 60)
    print("   click: spawn wave | m: toggle mode | c: clear")

    sim = HalftoneSimulation(config)

    fig, ax = plt.subplots(figsize=(config.width / 100, config.height / 100), dpi=100)
    fig.patch.set_facecolor("black")
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    ax.set_axis_off()

    image = ax.imshow(rasterize(sim.tick_frame()), origin="upper", interpolation="nearest")
    title = fig.suptitle(f"mode: {sim.mode}", color="white", y=0.98)

    def on_click(event):
        if event.inaxes != ax or event.xdata is None:
            return
        sim.on_impulse(event.xdata, event.ydata)

    def on_key(event):
        if event.key == "m":
            sim.set_mode("rainbow" if sim.mode == "default" else "default")
            title.set_text(f"mode: {sim.mode}")
        elif event.key == "c":
            sim.teardown()

    def on_resize(event):
        bbox = ax.get_window_extent()
        sim.on_resize(int(bbox.width), int(bbox.height))

    def update(_):
        frame = sim.tick_frame()
        image.set_data(rasterize(frame))
        image.set_extent((-0.5, frame.width - 0.5, frame.height - 0.5, -0.5))
        return [image, title]

    fig.canvas.mpl_connect("button_press_event", on_click)
    fig.canvas.mpl_connect("key_press_event", on_key)
    fig.canvas.mpl_connect("resize_event", on_resize)

    anim = FuncAnimation(fig, update, interval=16, blit=False, cache_frame_data=False)
    plt.show()

    sim.teardown()
    return anim


if __name__ == "__main__":
    main()
