"""Painter's-algorithm compositor.

Every pixel starts as the background and is overwritten by each shape in
the scene that covers it, in insertion order, so the last contributor
wins. Pixels are independent once the scene is fixed, which lets the
vectorized path evaluate one shape over a whole band of rows at a time.
"""

import logging

import numpy as np

from wallgen.core.shapes import contributes, coverage
from wallgen.core.types import Colour, Scene

logger = logging.getLogger(__name__)


def new_canvas(width: int, height: int, background: Colour) -> np.ndarray:
    """A (height, width, 3) uint8 canvas filled with the background colour."""
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:, :] = background
    return canvas


def composite(scene: Scene, canvas: np.ndarray, band_rows: int | None = None) -> np.ndarray:
    """Paint the scene onto canvas in place and return it.

    band_rows bounds how many rows are evaluated at once (None = all).
    """
    if band_rows is not None and band_rows < 1:
        raise ValueError(f'band_rows must be at least 1, got {band_rows}')
    height, width = canvas.shape[:2]
    step = band_rows or height or 1
    xs = np.arange(width)[np.newaxis, :]
    for top in range(0, height, step):
        bottom = min(top + step, height)
        ys = np.arange(top, bottom)[:, np.newaxis]
        band = canvas[top:bottom]
        for shape in scene:
            mask, colours = coverage(shape, xs, ys, band)
            band[...] = np.where(mask[..., np.newaxis], colours, band)
        logger.debug('composited rows %d-%d', top, bottom - 1)
    return canvas


def composite_pixelwise(scene: Scene, canvas: np.ndarray) -> np.ndarray:
    """Reference compositor: one contributes() call per shape per pixel."""
    height, width = canvas.shape[:2]
    for y in range(height):
        for x in range(width):
            px = tuple(int(c) for c in canvas[y, x])
            for shape in scene:
                colour = contributes(shape, x, y, px)
                if colour is not None:
                    px = colour
            canvas[y, x] = px
    return canvas


def render(scene: Scene, width: int, height: int, background: Colour, band_rows: int | None = None) -> np.ndarray:
    """Fresh canvas with the scene composited onto it."""
    logger.info('rendering %d shape(s) onto %dx%d canvas', len(scene), width, height)
    canvas = new_canvas(width, height, background)
    return composite(scene, canvas, band_rows=band_rows)
