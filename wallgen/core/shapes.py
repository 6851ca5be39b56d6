"""Shape hit-testing and the fractal colour rule.

Two entry points dispatch over the closed shape set (Circle, Rect,
MandelbrotField):

  contributes(shape, x, y, current)  one pixel, returns a colour or None
  coverage(shape, xs, ys, canvas)    a grid of pixels, returns (mask, colours)

coverage() is the numpy form of contributes() and must agree with it
pixel for pixel; the compositor uses it, the tests pin it to the scalar
form.

The "Mandelbrot" field iterates z -> z² + c with a fixed c = -0.4+0.6i and
the pixel as the starting point, which is a Julia set iteration. The name
is kept because the rendered output is what matters. Escape counts are
truncated to 8 bits before brightening, so counts of 256 and above wrap.
"""

import numpy as np

from wallgen.core.types import Circle, Colour, MandelbrotField, Rect, Shape

JULIA_CONSTANT = complex(-0.4, 0.6)
ESCAPE_RADIUS = 2.0
PLANE_OFFSET = 2.0
BRIGHTEN_DAMPING = 15


def pixel_to_complex(x: int, y: int, scalex: float, scaley: float) -> complex:
    return complex(x * scalex - PLANE_OFFSET, y * scaley - PLANE_OFFSET)


def escape_iterations(z: complex, max_iterations: int) -> int:
    """Index of the first iteration where |z| > 2, or max_iterations - 1."""
    for i in range(max_iterations):
        if abs(z) > ESCAPE_RADIUS:
            return i
        z = z * z + JULIA_CONSTANT
    return max(max_iterations - 1, 0)


def escape_grid(zs: np.ndarray, max_iterations: int) -> np.ndarray:
    """escape_iterations() over a whole array of starting points."""
    counts = np.full(zs.shape, max(max_iterations - 1, 0), dtype=np.int64)
    z = zs.astype(np.complex128, copy=True)
    active = np.ones(zs.shape, dtype=bool)
    for i in range(max_iterations):
        escaped = active & (np.abs(z) > ESCAPE_RADIUS)
        counts[escaped] = i
        active &= ~escaped
        if not active.any():
            break
        # Escaped points stay frozen so they never overflow
        za = z[active]
        z[active] = za * za + JULIA_CONSTANT
    return counts


def brightness_factor(iterations: int) -> int:
    return iterations & 0xFF


def brighten(colour: Colour, factor: int) -> Colour:
    """Move each channel towards white by (factor / 100) / 15 of the remaining gap."""
    r, g, b = (int(c + (factor / 100) * (255 - c) / BRIGHTEN_DAMPING) for c in colour)
    return (r, g, b)


def brighten_array(colours: np.ndarray, factors: np.ndarray) -> np.ndarray:
    """brighten() for an (h, w, 3) uint8 array and an (h, w) array of factors."""
    c = colours.astype(np.float64)
    f = factors.astype(np.float64)[..., np.newaxis]
    out = c + (f / 100) * (255 - c) / BRIGHTEN_DAMPING
    return np.trunc(out).astype(np.uint8)


def contributes(shape: Shape, x: int, y: int, current: Colour) -> Colour | None:
    """Colour the shape paints at (x, y), or None if it leaves the pixel alone."""
    if isinstance(shape, Circle):
        ox, oy = shape.origin
        if (x - ox) ** 2 + (y - oy) ** 2 < shape.radius**2:
            return shape.colour
        return None
    if isinstance(shape, Rect):
        ox, oy = shape.origin
        if ox <= x <= ox + shape.length and oy <= y <= oy + shape.height:
            return shape.colour
        return None
    if isinstance(shape, MandelbrotField):
        z = pixel_to_complex(x, y, shape.scalex, shape.scaley)
        i = escape_iterations(z, shape.max_iterations)
        return brighten(current, brightness_factor(i))
    raise TypeError(f'Unknown shape: {shape!r}')


def coverage(shape: Shape, xs: np.ndarray, ys: np.ndarray, canvas: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Mask of covered pixels and the colours painted there.

    xs has shape (1, w) and ys (h, 1); canvas is the (h, w, 3) block they
    address. The returned colours broadcast against canvas.
    """
    grid = canvas.shape[:2]
    if isinstance(shape, Circle):
        ox, oy = shape.origin
        dx = xs.astype(np.int64) - ox
        dy = ys.astype(np.int64) - oy
        mask = dx * dx + dy * dy < shape.radius * shape.radius
        return np.broadcast_to(mask, grid), np.array(shape.colour, dtype=np.uint8)
    if isinstance(shape, Rect):
        ox, oy = shape.origin
        in_x = (xs >= ox) & (xs <= ox + shape.length)
        in_y = (ys >= oy) & (ys <= oy + shape.height)
        return np.broadcast_to(in_x & in_y, grid), np.array(shape.colour, dtype=np.uint8)
    if isinstance(shape, MandelbrotField):
        zs = np.empty(grid, dtype=np.complex128)
        zs.real = xs * shape.scalex - PLANE_OFFSET
        zs.imag = ys * shape.scaley - PLANE_OFFSET
        factors = escape_grid(zs, shape.max_iterations) & 0xFF
        return np.ones(grid, dtype=bool), brighten_array(canvas, factors)
    raise TypeError(f'Unknown shape: {shape!r}')
