#!/usr/bin/env python3
"""
Demo: Scripted Halftone Scenario

Renders a fixed sequence of clicks offline and saves a strip of frames:
1. Two white waves in default mode
2. Switch to rainbow mode, add a third wave
3. Switch back: the rainbow wave keeps its colors until it expires

Output: output/demo_scenario/frames.png, output/demo_scenario/strength.png
"""

from pathlib import Path

import matplotlib.pyplot as plt

from halftone.core import HalftoneSimulation, SimulationConfig
from halftone.logger_setup import setup_logging
from halftone.viz import plot_frames, plot_strength, save_figure


def main():
    setup_logging("INFO")

    print("=" * 60)
    print("  HALFTONE SCENARIO")
    print("=" * 60)

    config = SimulationConfig(width=640, height=400, seed=7)
    sim = HalftoneSimulation(config)

    # (tick, action, args)
    script = {
        0: ("impulse", (160, 200)),
        20: ("impulse", (480, 120)),
        40: ("mode", "rainbow"),
        41: ("impulse", (320, 300)),
        60: ("mode", "default"),
        80: ("impulse", (100, 350)),
    }
    snapshot_ticks = {5, 25, 45, 65, 85, 105, 125, 145}

    print("\n1. Running 150 ticks...")
    frames = []
    for tick in range(150):
        if tick in script:
            action, arg = script[tick]
            if action == "impulse":
                sim.on_impulse(*arg)
                print(f"   tick {tick:3d}: impulse at {arg}")
            else:
                sim.set_mode(arg)
                print(f"   tick {tick:3d}: mode -> {arg}")

        frame = sim.tick_frame()
        if tick in snapshot_ticks:
            frames.append(frame)
            print(f"   tick {tick:3d}: {len(frame.primitives)} dots, {len(sim.pool)} live waves")

    output_dir = Path("output/demo_scenario")

    print("\n2. Saving frame strip...")
    fig = plot_frames(frames, ncols=4)
    save_figure(fig, output_dir / "frames.png")
    print(f"   Saved: {output_dir / 'frames.png'}")

    print("\n3. Saving strength field...")
    sim.on_impulse(320, 200)
    sim.tick()
    for _ in range(20):
        sim.tick()
    fig, _ = plot_strength(sim.driver.evaluate(*sim.size))
    save_figure(fig, output_dir / "strength.png")
    print(f"   Saved: {output_dir / 'strength.png'}")

    plt.close("all")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
