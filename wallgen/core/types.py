"""Shared types for wallgen: Colour, Point, shapes, Scene, Config, Style, RenderReport."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

Colour = tuple[int, int, int]
Point = tuple[int, int]

DEFAULT_WIDTH = 1366
DEFAULT_HEIGHT = 768
DEFAULT_BACKGROUND = '#000000'
DEFAULT_COLOURS = '#FFFFFF,#FF0000,#00FF00,#0000FF'
DEFAULT_OUTPUT = 'imageout.png'
MAX_ITERATIONS_LIMIT = 65535


class SceneError(ValueError):
    """Configuration value the scene builder cannot use."""


@dataclass(frozen=True)
class Circle:
    """Filled circle. A pixel is inside iff its squared distance is < radius²."""

    origin: Point
    radius: int
    colour: Colour


@dataclass(frozen=True)
class Rect:
    """Filled rectangle with inclusive bounds on both axes."""

    origin: Point
    length: int  # extent along x
    height: int  # extent along y
    colour: Colour


@dataclass(frozen=True)
class MandelbrotField:
    """Fractal field covering the whole canvas. Colour is computed per pixel."""

    max_iterations: int
    scalex: float
    scaley: float


Shape = Circle | Rect | MandelbrotField


@dataclass(frozen=True)
class Scene:
    """Ordered shapes for one render. Later shapes paint over earlier ones."""

    shapes: tuple[Shape, ...] = ()

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)


@dataclass
class Config:
    """Everything a render needs, as handed over by the CLI or a caller."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    background: str = DEFAULT_BACKGROUND
    colours: str = DEFAULT_COLOURS
    style: str = 'Circle'
    shape_count: int = 10
    bars: int = 5
    vertical_bars: bool = False
    max_radius: int = 250
    max_length: int = 250
    max_height: int = 250
    max_iterations: int = 255
    scale: float = 4.0
    seed: int | None = None
    output: str = DEFAULT_OUTPUT


class Style:
    """A self-registering scene style.

    Usage in a style module:

        style = Style(name='Circle', help='Randomly placed circles')

        @style.build
        def build(config, palette, rng):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._build_fn: Callable | None = None

    def build(self, fn: Callable) -> Callable:
        """Decorator to register the build function."""
        self._build_fn = fn
        return fn

    def execute(self, config: Config, palette: list[Colour], rng: Any) -> list[Shape]:
        """Run the style's build function and return its shapes in paint order."""
        if self._build_fn is None:
            raise RuntimeError(f'Style {self.name} has no build function')
        return list(self._build_fn(config, palette, rng))


@dataclass
class RenderReport:
    """What one render produced, for text/JSON output."""

    width: int = 0
    height: int = 0
    style: str = ''
    seed: int | None = None
    output: str | None = None
    shape_count: int = 0
    background: str = ''
    palette: list[str] = field(default_factory=list)
    census: list[dict[str, Any]] = field(default_factory=list)
