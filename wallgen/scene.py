"""Scene building — Config to an ordered, immutable Scene.

Decodes the palette, checks the numeric options every style relies on,
then hands off to the registered style. The random source is explicit:
pass a numpy Generator, or let one be seeded from config.seed.
"""

import logging

import numpy as np

from wallgen import registry
from wallgen.core.colour import parse_colour, parse_palette
from wallgen.core.types import Colour, Config, Scene, SceneError

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def validate(config: Config) -> None:
    """Reject dimensions and counts no style can work with."""
    if config.width < 1 or config.height < 1:
        raise SceneError(f'Canvas must be at least 1x1, got {config.width}x{config.height}')
    if config.shape_count < 0:
        raise SceneError(f'shape_count must not be negative, got {config.shape_count}')


def resolve_background(config: Config) -> Colour:
    return parse_colour(config.background)


def build_scene(config: Config, rng: np.random.Generator | None = None, palette: list[Colour] | None = None) -> Scene:
    """Build the scene for config. Raises ColourError, SceneError or KeyError."""
    validate(config)
    if palette is None:
        palette = parse_palette(config.colours)
    style = registry.get(config.style)
    if rng is None:
        rng = make_rng(config.seed)
    shapes = style.execute(config, palette, rng)
    logger.info('built %d %s shape(s)', len(shapes), style.name)
    return Scene(tuple(shapes))
