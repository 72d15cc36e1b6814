"""Unit tests for FrameDriver."""

import pytest

from halftone.core.color import BLACK
from halftone.core.field import FieldConfig
from halftone.core.frame import FrameDriver
from halftone.core.pool import ImpulsePool


class TestFrameDriver:
    """Tests for one-tick rendering."""

    def test_empty_pool_yields_background_only(self, rng):
        driver = FrameDriver(ImpulsePool(rng=rng))

        for _ in range(5):
            frame = driver.tick(100, 80)
            assert frame.primitives == []
            assert frame.background == BLACK
            assert (frame.rows, frame.cols) == (4, 5)

        assert len(driver.pool) == 0

    def test_renders_before_advancing(self, rng):
        pool = ImpulsePool(rng=rng)
        imp = pool.insert(0.0, 0.0)
        driver = FrameDriver(pool)

        frame = driver.tick(40, 40)

        first = frame.primitives[0]
        assert first.center == (0.0, 0.0)
        assert first.radius == pytest.approx(8.0)
        assert imp.origin == (3.0, 2.0)
        assert imp.age == pytest.approx(0.016)

    def test_grid_follows_surface_size(self, rng):
        driver = FrameDriver(ImpulsePool(rng=rng))

        assert (driver.tick(40, 40).rows, driver.tick(40, 40).cols) == (2, 2)
        frame = driver.tick(100, 61)
        assert (frame.rows, frame.cols) == (4, 5)
        frame = driver.tick(0, 0)
        assert (frame.rows, frame.cols) == (0, 0)

    def test_degenerate_surface_still_steps_pool(self, rng):
        pool = ImpulsePool(rng=rng)
        imp = pool.insert(10.0, 10.0)
        driver = FrameDriver(pool)

        frame = driver.tick(0, 0)

        assert frame.primitives == []
        assert imp.origin == (0.0, 0.0)
        assert imp.age == pytest.approx(0.016)

    def test_tick_counter(self, rng):
        driver = FrameDriver(ImpulsePool(rng=rng))
        ticks = [driver.tick(20, 20).tick for _ in range(3)]
        assert ticks == [0, 1, 2]
        assert driver.current_tick == 3

    def test_evaluate_does_not_mutate(self, rng):
        pool = ImpulsePool(rng=rng)
        imp = pool.insert(0.0, 0.0)
        driver = FrameDriver(pool)

        driver.evaluate(40, 40)

        assert imp.origin == (0.0, 0.0)
        assert imp.age == 0.0

    def test_expired_impulse_rendered_on_last_tick_then_gone(self, rng):
        pool = ImpulsePool(rng=rng)
        imp = pool.insert(0.0, 0.0)
        imp.age = 1.99
        driver = FrameDriver(pool, FieldConfig())

        # Ring is far away by now; the near cells see nothing but the
        # impulse is still live during this render
        driver.tick(40, 40)
        assert len(pool) == 0
        assert driver.tick(40, 40).primitives == []
