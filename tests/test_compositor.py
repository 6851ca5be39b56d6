"""Tests for wallgen.core.compositor — painter's-algorithm overlap rules."""

import numpy as np
import pytest
from wallgen.core.compositor import composite, composite_pixelwise, new_canvas, render
from wallgen.core.types import Circle, Config, MandelbrotField, Rect, Scene
from wallgen.scene import build_scene

BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


class TestNewCanvas:
    def test_shape_and_fill(self):
        canvas = new_canvas(5, 3, (1, 2, 3))
        assert canvas.shape == (3, 5, 3)
        assert canvas.dtype == np.uint8
        assert (canvas == np.array([1, 2, 3], dtype=np.uint8)).all()


class TestRender:
    def test_full_cover_rect_paints_everything(self):
        scene = Scene((Rect(origin=(0, 0), length=4, height=4, colour=RED),))
        canvas = render(scene, 4, 4, BLACK)
        assert (canvas == np.array(RED, dtype=np.uint8)).all()

    def test_empty_scene_keeps_background(self):
        canvas = render(Scene(), 6, 2, BLUE)
        assert (canvas == np.array(BLUE, dtype=np.uint8)).all()

    def test_uncovered_pixels_keep_background(self):
        scene = Scene((Rect(origin=(0, 0), length=1, height=1, colour=RED),))
        canvas = render(scene, 4, 4, BLACK)
        assert tuple(canvas[1, 1]) == RED
        assert tuple(canvas[2, 2]) == BLACK
        assert tuple(canvas[0, 3]) == BLACK

    def test_last_contributor_wins(self):
        a = Rect(origin=(0, 0), length=3, height=3, colour=RED)
        b = Circle(origin=(1, 1), radius=2, colour=GREEN)
        assert tuple(render(Scene((a, b)), 4, 4, BLACK)[1, 1]) == GREEN
        assert tuple(render(Scene((b, a)), 4, 4, BLACK)[1, 1]) == RED

    def test_earlier_shape_shows_outside_later_one(self):
        big = Rect(origin=(0, 0), length=7, height=0, colour=RED)
        small = Rect(origin=(0, 0), length=2, height=0, colour=GREEN)
        canvas = render(Scene((big, small)), 8, 1, BLACK)
        assert [tuple(px) for px in canvas[0]] == [GREEN] * 3 + [RED] * 5

    def test_field_brightens_background(self):
        width, height = 8, 8
        field = MandelbrotField(max_iterations=255, scalex=4.0 / width, scaley=4.0 / height)
        canvas = render(Scene((field,)), width, height, (50, 50, 50))
        # (0, 0) maps to -2-2i, which is already outside radius 2
        assert tuple(canvas[0, 0]) == (50, 50, 50)
        assert (canvas >= 50).all()


class TestCompositeEquivalence:
    def _both(self, scene: Scene, width: int, height: int, background) -> tuple[np.ndarray, np.ndarray]:
        fast = composite(scene, new_canvas(width, height, background))
        slow = composite_pixelwise(scene, new_canvas(width, height, background))
        return fast, slow

    def test_random_circles(self):
        config = Config(width=24, height=16, style='Circle', shape_count=12, max_radius=9, seed=11)
        fast, slow = self._both(build_scene(config), 24, 16, BLACK)
        assert np.array_equal(fast, slow)

    def test_random_rectangles(self):
        config = Config(width=24, height=16, style='Rectangle', shape_count=12, max_length=10, max_height=6, seed=5)
        fast, slow = self._both(build_scene(config), 24, 16, BLACK)
        assert np.array_equal(fast, slow)

    def test_bars(self):
        config = Config(width=20, height=6, style='Bars', bars=4, seed=2)
        fast, slow = self._both(build_scene(config), 20, 6, BLACK)
        assert np.array_equal(fast, slow)

    def test_fractal(self):
        config = Config(width=20, height=14, style='Mandelbrot', max_iterations=60)
        fast, slow = self._both(build_scene(config), 20, 14, (30, 60, 90))
        assert np.array_equal(fast, slow)

    def test_banding_does_not_change_output(self):
        config = Config(width=30, height=17, style='Circle', shape_count=20, max_radius=12, seed=3)
        scene = build_scene(config)
        whole = composite(scene, new_canvas(30, 17, BLACK))
        banded = composite(scene, new_canvas(30, 17, BLACK), band_rows=4)
        assert np.array_equal(whole, banded)

    @pytest.mark.parametrize('band_rows', [0, -1])
    def test_band_rows_below_one_rejected(self, band_rows):
        scene = Scene((Rect(origin=(0, 0), length=4, height=4, colour=RED),))
        with pytest.raises(ValueError, match='band_rows'):
            composite(scene, new_canvas(4, 4, BLACK), band_rows=band_rows)

    def test_band_rows_larger_than_canvas(self):
        scene = Scene((Rect(origin=(0, 0), length=4, height=4, colour=RED),))
        canvas = composite(scene, new_canvas(4, 4, BLACK), band_rows=100)
        assert (canvas == np.array(RED, dtype=np.uint8)).all()
