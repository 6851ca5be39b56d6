"""Random draws shared by the randomized styles.

Positions and sizes come from a uniform unsigned 32-bit value reduced
modulo the range, so ranges that do not divide 2**32 are very slightly
biased towards small values.
"""

import numpy as np

from wallgen.core.types import Colour, Config, SceneError

U32_RANGE = 2**32


def draw_u32(rng: np.random.Generator) -> int:
    return int(rng.integers(0, U32_RANGE, dtype=np.uint64))


def draw_below(rng: np.random.Generator, bound: int) -> int:
    return draw_u32(rng) % bound


def draw_origin(rng: np.random.Generator, config: Config) -> tuple[int, int]:
    return (draw_below(rng, config.width), draw_below(rng, config.height))


def pick_colour(rng: np.random.Generator, palette: list[Colour]) -> Colour:
    return palette[int(rng.integers(len(palette)))]


def require_positive(name: str, value: int) -> int:
    if value < 1:
        raise SceneError(f'{name} must be at least 1, got {value}')
    return value
