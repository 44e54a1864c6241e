"""Colour maths — hex parsing and perceptual brightness/saturation.

Pure functions over RGB triples. Every function that scores a colour
accepts either a triple or a hex string; `to_rgb` resolves both into a
canonical (r, g, b) tuple before any arithmetic happens.

Brightness uses the perceived-brightness weighting
sqrt(0.241 R² + 0.691 G² + 0.068 B²), so green counts heaviest and a grey
(v, v, v) scores exactly v.
"""

from __future__ import annotations

import math
import operator
import string
from collections.abc import Sequence
from typing import Union

from accent_tools.core.errors import InvalidFormat

Colour = tuple[int, int, int]
ColourInput = Union[Colour, Sequence[int], str]

_HEX_DIGITS = frozenset(string.hexdigits)

BRIGHTNESS_WEIGHTS = (0.241, 0.691, 0.068)


def _parse_pair(pair: str, source: str) -> int:
    if len(pair) != 2 or not _HEX_DIGITS.issuperset(pair):
        raise InvalidFormat(f'Invalid hex colour: {source!r}')
    return int(pair, 16)


def hex_to_rgb(hex_colour: str) -> Colour:
    """Parse '#rgb', 'rgb', '#rrggbb' or 'rrggbb' into an (r, g, b) tuple.

    The short form doubles each digit ('f0a' -> 'ff00aa'). On the long form
    only the first six digits are read; anything after them is ignored.
    """
    if not isinstance(hex_colour, str):
        raise InvalidFormat(f'Hex colour must be a string, got {type(hex_colour).__name__}')

    digits = hex_colour.strip()
    if digits.startswith('#'):
        digits = digits[1:]

    if len(digits) == 3:
        digits = ''.join(d * 2 for d in digits)
    elif len(digits) < 6:
        raise InvalidFormat(f'Hex colour needs 3 or at least 6 digits: {hex_colour!r}')

    r = _parse_pair(digits[0:2], hex_colour)
    g = _parse_pair(digits[2:4], hex_colour)
    b = _parse_pair(digits[4:6], hex_colour)
    return (r, g, b)


def rgb_to_hex(colour: ColourInput) -> str:
    r, g, b = to_rgb(colour)
    return f'#{r:02x}{g:02x}{b:02x}'


def to_rgb(colour: ColourInput) -> Colour:
    """Resolve a hex string or a 3-channel sequence into a Colour."""
    if isinstance(colour, str):
        return hex_to_rgb(colour)

    try:
        channels = tuple(colour)
    except TypeError:
        raise InvalidFormat(f'Not a colour: {colour!r}') from None

    if len(channels) != 3:
        raise InvalidFormat(f'Colour needs exactly 3 channels, got {len(channels)}')
    values = []
    for ch in channels:
        # bool is an int subclass but never a channel value
        if isinstance(ch, bool):
            raise InvalidFormat(f'Channel values must be integers: {colour!r}')
        try:
            value = operator.index(ch)
        except TypeError:
            raise InvalidFormat(f'Channel values must be integers: {colour!r}') from None
        if not 0 <= value <= 255:
            raise InvalidFormat(f'Channel value out of range 0-255: {colour!r}')
        values.append(value)
    return (values[0], values[1], values[2])


def brightness(colour: ColourInput) -> float:
    """Perceived brightness of a colour. Grey (v, v, v) scores v."""
    r, g, b = to_rgb(colour)
    wr, wg, wb = BRIGHTNESS_WEIGHTS
    return math.sqrt(wr * r * r + wg * g * g + wb * b * b)


def saturation(colour: ColourInput) -> float:
    """(max - min) / max over the three channels.

    Pure black has no defined saturation; it scores 0.0 like any other grey.
    """
    r, g, b = to_rgb(colour)
    hi = max(r, g, b)
    if hi == 0:
        return 0.0
    return (hi - min(r, g, b)) / hi
