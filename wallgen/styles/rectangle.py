"""Randomly placed filled rectangles.

Draws --num-shapes rectangles anchored at a uniform random corner, with
length in [0, --max-length) and height in [0, --max-rect-height). Bounds
are inclusive, so a 0×0 rectangle still paints its corner pixel.

Example:
    wallgen -s Rectangle -n 40 --max-length 300 --max-rect-height 80
"""

from wallgen.core.types import Rect, Style
from wallgen.styles._draw import draw_below, draw_origin, pick_colour, require_positive

style = Style(
    name='Rectangle',
    help='Randomly placed rectangles coloured from the palette.',
)


@style.build
def build(config, palette, rng) -> list[Rect]:
    max_length = require_positive('max_length', config.max_length)
    max_height = require_positive('max_height', config.max_height)
    shapes = []
    for _ in range(config.shape_count):
        origin = draw_origin(rng, config)
        length = draw_below(rng, max_length)
        height = draw_below(rng, max_height)
        shapes.append(Rect(origin=origin, length=length, height=height, colour=pick_colour(rng, palette)))
    return shapes
