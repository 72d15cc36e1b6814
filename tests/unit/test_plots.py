"""Unit tests for matplotlib frame views."""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from halftone.viz import plot_frame, plot_frames, plot_strength, save_figure


class TestPlots:
    """Smoke tests: figures build and save."""

    def test_plot_frame_and_save(self, small_sim, tmp_path):
        small_sim.on_impulse(20.0, 20.0)
        fig, ax = plot_frame(small_sim.tick_frame())

        assert ax.get_title() == "Tick 0"

        path = tmp_path / "out" / "frame.png"
        save_figure(fig, path, dpi=50)
        plt.close(fig)

        assert path.exists()

    def test_plot_frames_grid(self, small_sim):
        small_sim.on_impulse(0.0, 0.0)
        frames = [small_sim.tick_frame() for _ in range(5)]

        fig = plot_frames(frames, ncols=2)

        assert len(fig.axes) == 6
        plt.close(fig)

    def test_plot_strength(self, small_sim):
        small_sim.on_impulse(0.0, 0.0)
        small_sim.tick()
        fig, ax = plot_strength(small_sim.driver.evaluate(*small_sim.size), colorbar=False)

        assert ax.get_title() == "Wave Strength"
        plt.close(fig)
