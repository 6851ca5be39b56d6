"""Fractal field brightening the background.

Adds one field covering the canvas. Pixel (x, y) maps to
z = (x * scale / width - 2) + (y * scale / height - 2)i and iterates
z -> z² + (-0.4 + 0.6i) up to --iterations times, stopping once |z| > 2.
The stopping index (mod 256) brightens the background towards white by
(index / 100) / 15 of the remaining gap per channel.

The palette is not used; pick the background to tint the result.

Example:
    wallgen -s Mandelbrot -b '#102040' --iterations 200
    wallgen -s Mandelbrot --scale 3.0 -o julia.png
"""

from wallgen.core.types import MAX_ITERATIONS_LIMIT, MandelbrotField, SceneError, Style

style = Style(
    name='Mandelbrot',
    help='Single fractal field; background brightened by escape iteration count.',
)


@style.build
def build(config, palette, rng) -> list[MandelbrotField]:
    if not 0 <= config.max_iterations <= MAX_ITERATIONS_LIMIT:
        raise SceneError(f'max_iterations must be in 0..{MAX_ITERATIONS_LIMIT}, got {config.max_iterations}')
    return [
        MandelbrotField(
            max_iterations=config.max_iterations,
            scalex=config.scale / config.width,
            scaley=config.scale / config.height,
        )
    ]
