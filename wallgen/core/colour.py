"""Hex colour codec — "#RRGGBB" strings to RGB triples.

The first character is a marker and is dropped unread. The rest is read
two characters at a time against the uppercase alphabet 0-9A-F. A code
must decode to exactly three bytes: "#RRGGBBAA" decodes cleanly but is
still rejected, as is anything with a dangling half pair.
"""

from collections.abc import Iterable

from wallgen.core.types import Colour

HEX_DIGITS = '0123456789ABCDEF'


class ColourError(ValueError):
    """A colour or palette string that cannot be decoded."""


def _hex_value(c: str) -> int:
    n = HEX_DIGITS.find(c)
    if n < 0:
        raise ColourError(f'Invalid hex character: {c}')
    return n


def _parse_hex_pair(pair: str) -> int:
    return _hex_value(pair[0]) * 16 + _hex_value(pair[1])


def parse_colour(text: str) -> Colour:
    """Decode "#RRGGBB" into an (r, g, b) tuple. Raises ColourError."""
    digits = text[1:]
    data = []
    for i in range(0, len(digits), 2):
        pair = digits[i : i + 2]
        if len(pair) != 2:
            raise ColourError(f'Invalid hex code: {text}')
        data.append(_parse_hex_pair(pair))
    if len(data) != 3:
        raise ColourError(f'Invalid hex code: {text}')
    return (data[0], data[1], data[2])


def parse_palette(text: str | Iterable[str]) -> list[Colour]:
    """Decode a comma separated list of colours (or an iterable of them)."""
    entries = text.split(',') if isinstance(text, str) else list(text)
    if not entries:
        raise ColourError('Empty palette')
    return [parse_colour(entry) for entry in entries]


def format_colour(colour: Colour) -> str:
    r, g, b = colour
    return f'#{r:02X}{g:02X}{b:02X}'
