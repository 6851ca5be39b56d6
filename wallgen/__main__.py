"""wallgen — Generate a wallpaper from random shapes, bars or a fractal field.

Usage: wallgen [options]

Styles are auto-discovered from wallgen/styles/.
Each style module's docstring is its documentation.
Run `wallgen --describe <style>` for full style docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, wallgen looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  WALLGEN_<OPTION> variables (e.g. WALLGEN_WIDTH, WALLGEN_COLOURS) set
  option defaults; command line flags still win.
"""

import argparse
import logging
import secrets
import sys

from wallgen import registry
from wallgen.core.colour import format_colour, parse_palette
from wallgen.core.compositor import render
from wallgen.core.env import env_defaults, load_env
from wallgen.core.log import setup_logging
from wallgen.core.report import colour_census, format_json, format_text
from wallgen.core.sink import save_png
from wallgen.core.types import (
    DEFAULT_BACKGROUND,
    DEFAULT_COLOURS,
    DEFAULT_HEIGHT,
    DEFAULT_OUTPUT,
    DEFAULT_WIDTH,
    Config,
    RenderReport,
)
from wallgen.scene import build_scene, resolve_background

logger = logging.getLogger('wallgen')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  wallgen\n'
        '  wallgen -s Rectangle -n 40 -o rects.png\n'
        "  wallgen -s Bars --bars 6 --vertical-bars -c '#222222,#444444,#666666'\n"
        "  wallgen -s Mandelbrot -b '#102040' --iterations 200\n"
        '  wallgen --seed 7 --json -o ""\n'
        '  wallgen --list-styles\n'
        '  wallgen --describe Bars\n'
    )
    parser = argparse.ArgumentParser(
        prog='wallgen',
        description='Generate a wallpaper with some colours and shapes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-w', '--width', type=int, default=DEFAULT_WIDTH, help='Image width in pixels.')
    parser.add_argument('-H', '--height', type=int, default=DEFAULT_HEIGHT, help='Image height in pixels.')
    parser.add_argument('-b', '--background', default=DEFAULT_BACKGROUND, help='Background colour (#RRGGBB).')
    parser.add_argument(
        '-c',
        '--colours',
        default=DEFAULT_COLOURS,
        help='Shape colours (comma separated #RRGGBB values).',
    )
    parser.add_argument('-s', '--style', default='Circle', help='Style of wallpaper (see --list-styles).')
    parser.add_argument('-n', '--num-shapes', type=int, default=10, help='Number of shapes (Circle, Rectangle).')
    parser.add_argument('--bars', type=int, default=5, help='Number of bars (Bars).')
    parser.add_argument('--vertical-bars', action='store_true', help='Stack bars down the height (Bars).')
    parser.add_argument('--max-radius', type=int, default=250, help='Upper bound for circle radii (exclusive).')
    parser.add_argument('--max-length', type=int, default=250, help='Upper bound for rectangle length (exclusive).')
    parser.add_argument(
        '--max-rect-height',
        type=int,
        default=250,
        help='Upper bound for rectangle height (exclusive).',
    )
    parser.add_argument('--iterations', type=int, default=255, help='Fractal iteration limit, 0..65535 (Mandelbrot).')
    parser.add_argument('--scale', type=float, default=4.0, help='Span of the complex plane shown (Mandelbrot).')
    parser.add_argument('--seed', type=int, default=None, help='Random seed (default: fresh, reported on output).')
    parser.add_argument(
        '-o',
        '--output',
        default=DEFAULT_OUTPUT,
        help='PNG output path. An empty string renders without writing a file.',
    )
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='Log progress (-vv for debug).')
    parser.add_argument('--list-styles', action='store_true', help='List available styles and exit.')
    parser.add_argument('--describe', metavar='STYLE', help='Print full docs for a style and exit.')
    return parser


def _print_help(name: str | None) -> None:
    """Print the style list, or one style module's full docstring."""
    styles = registry.all_styles()

    if name is None:
        print('Available styles:\n')
        for style_name, style in sorted(styles.items()):
            print(f'  {style_name:<12} {style.help}')
        print('\nRun: wallgen --describe <style> for full docs.')
        return

    if name not in styles:
        print(f'Unsupported style: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(styles))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.style_module(name).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {name!r})')
        return
    print(doc)


def _config_from_args(args: argparse.Namespace) -> Config:
    seed = args.seed if args.seed is not None else secrets.randbits(32)
    return Config(
        width=args.width,
        height=args.height,
        background=args.background,
        colours=args.colours,
        style=args.style,
        shape_count=args.num_shapes,
        bars=args.bars,
        vertical_bars=args.vertical_bars,
        max_radius=args.max_radius,
        max_length=args.max_length,
        max_height=args.max_rect_height,
        max_iterations=args.iterations,
        scale=args.scale,
        seed=seed,
        output=args.output,
    )


def _fail(message: str) -> None:
    print(f'Error: {message}', file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    pre, _ = parser.parse_known_args(argv)

    # Load .env before reading WALLGEN_* defaults; OS env vars always win
    env_path = load_env(env_file=pre.env_file)
    if env_path:
        print(f'wallgen: loaded {env_path}', file=sys.stderr)
    try:
        parser.set_defaults(**env_defaults())
    except ValueError as e:
        _fail(str(e))

    args = parser.parse_args(argv)
    levels = {0: logging.WARNING, 1: logging.INFO}
    setup_logging(levels.get(args.verbose, logging.DEBUG))

    if args.list_styles:
        _print_help(None)
        return
    if args.describe:
        _print_help(args.describe)
        return

    config = _config_from_args(args)
    try:
        background = resolve_background(config)
        palette = parse_palette(config.colours)
        scene = build_scene(config, palette=palette)
    except KeyError as e:
        _fail(e.args[0])
    except ValueError as e:
        _fail(str(e))

    canvas = render(scene, config.width, config.height, background)
    written = save_png(canvas, config.output)
    if written:
        logger.info('wrote %s', written)

    report = RenderReport(
        width=config.width,
        height=config.height,
        style=config.style,
        seed=config.seed,
        output=written,
        shape_count=len(scene),
        background=format_colour(background),
        palette=[format_colour(c) for c in palette],
        census=colour_census(canvas),
    )
    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
