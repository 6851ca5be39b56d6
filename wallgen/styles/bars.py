"""Nested bands of colour anchored at the top-left corner.

Builds --bars rectangles at (0, 0). With step = ceil(width / bars), bar k
(k = bars .. 1) is k * step wide and the full canvas height. The widest
bar is painted first and each narrower one paints over its left part, so
the canvas ends up as side-by-side bands, each coloured at random from
the palette. --vertical-bars swaps the axes: bars grow down the height
and span the full width.

Example:
    wallgen -s Bars --bars 8 -c '#1A1A2E,#16213E,#0F3460,#E94560'
    wallgen -s Bars --bars 4 --vertical-bars
"""

import math

from wallgen.core.types import Rect, Style
from wallgen.styles._draw import pick_colour, require_positive

style = Style(
    name='Bars',
    help='Nested full-height (or full-width) bands, largest painted first.',
)


@style.build
def build(config, palette, rng) -> list[Rect]:
    bars = require_positive('bars', config.bars)
    if config.vertical_bars:
        step = math.ceil(config.height / bars)
    else:
        step = math.ceil(config.width / bars)

    shapes = []
    for k in range(bars, 0, -1):
        extent = k * step
        if config.vertical_bars:
            rect = Rect(origin=(0, 0), length=config.width, height=extent, colour=pick_colour(rng, palette))
        else:
            rect = Rect(origin=(0, 0), length=extent, height=config.height, colour=pick_colour(rng, palette))
        shapes.append(rect)
    return shapes
