"""Randomly placed filled circles.

Draws --num-shapes circles. Each centre is uniform over the canvas, each
radius uniform in [0, --max-radius), each colour drawn from the palette
with replacement. A pixel is inside when its squared distance to the
centre is strictly less than radius², so a radius of 0 paints nothing.

Example:
    wallgen -s Circle -n 25 --max-radius 120 -c '#FFFFFF,#FF0000'
"""

from wallgen.core.types import Circle, Style
from wallgen.styles._draw import draw_below, draw_origin, pick_colour, require_positive

style = Style(
    name='Circle',
    help='Randomly placed circles coloured from the palette.',
)


@style.build
def build(config, palette, rng) -> list[Circle]:
    max_radius = require_positive('max_radius', config.max_radius)
    shapes = []
    for _ in range(config.shape_count):
        origin = draw_origin(rng, config)
        shapes.append(
            Circle(
                origin=origin,
                radius=draw_below(rng, max_radius),
                colour=pick_colour(rng, palette),
            )
        )
    return shapes
