"""Conversion between hex color codes and colors.

Hex color codes are accepted in any of the forms ``RGB``, ``RGBA``,
``RRGGBB`` or ``RRGGBBAA``, in either case, optionally prefixed with ``#`` or
``0x``. The short forms are expanded by doubling each digit, so ``F08`` is
the same color as ``FF0088``. Codes without an alpha component are opaque.

Colors are always formatted in the long ``#RRGGBBAA`` form.

"""
import math
import re
from functools import lru_cache
from typing import Optional, Sequence, Union

from .color import Color
from .text import trim, remove_prefix

__all__ = (
    'InvalidFormat',
    'color_from_hex',
    'hex_from_color',
)

HEX_DIGITS = r'(0X|#)?([0-9A-F]{3,4}|[0-9A-F]{6}|[0-9A-F]{8})'

# Matches a hex color code appearing as a token within a longer string
HEX_PATTERN = re.compile(rf'\b{HEX_DIGITS}\b')

# Matches a string that is nothing but a hex color code
STRICT_HEX_PATTERN = re.compile(HEX_DIGITS)


class InvalidFormat(ValueError):
    """The string was not a valid hex color code."""


def color_from_hex(hexstr: str, *, strict: bool = False) -> Color:
    """Parse a hex color code into a Color.

    Normally the color code is searched for within the string, so that
    surrounding text such as ``"color: #F08;"`` is ignored. Pass strict=True
    to require that the whole string is a color code.

    Raise InvalidFormat if the string does not contain a valid color code.

    """
    if not isinstance(hexstr, str):
        raise InvalidFormat(f"{hexstr!r} is not a string")
    return _parse_hex(hexstr, strict)


@lru_cache()
def _parse_hex(hexstr: str, strict: bool) -> Color:
    normalized = trim(hexstr).upper()
    if strict:
        match = STRICT_HEX_PATTERN.fullmatch(normalized)
    else:
        match = HEX_PATTERN.search(normalized)
    if match is None:
        raise InvalidFormat(
            f'{hexstr!r} is not a valid hex color code. '
            'Color codes are RGB, RGBA, RRGGBB or RRGGBBAA, '
            'optionally prefixed with # or 0x'
        )

    digits = remove_prefix(remove_prefix(match.group(), '0X'), '#')

    if len(digits) in (3, 4):
        digits = ''.join(d * 2 for d in digits)

    if len(digits) not in (6, 8):
        raise InvalidFormat(f'{hexstr!r} has the wrong number of digits')

    try:
        value = int(digits, 16)
    except ValueError:
        raise InvalidFormat(f'{hexstr!r} is not hexadecimal') from None

    if len(digits) == 8:
        return Color.from_rgba_int(value)
    return Color.from_rgb_int(value)


def _channel_byte(v: float) -> int:
    """Scale a channel to a byte, clamping it to range; NaN reads as 0."""
    v = float(v)
    if math.isnan(v):
        return 0
    return round(min(1.0, max(0.0, v)) * 255)


def hex_from_color(
        color: Union[Color, Sequence[float]]) -> Optional[str]:
    """Format a color as a ``#RRGGBBAA`` hex string.

    As well as a Color, this accepts any sequence of channel fractions:
    RGB (treated as opaque), RGBA, or a (white, alpha) pair. Return None
    for sequences that cannot be interpreted as a color. Channels outside
    0.0 to 1.0 are clamped, and NaN channels are written as 00.

    """
    channels = tuple(color)
    if len(channels) == 2:
        w, a = channels
        channels = (w, w, w, a)
    elif len(channels) == 3:
        channels += (1.0,)
    elif len(channels) != 4:
        return None
    return '#' + ''.join(f'{_channel_byte(c):02X}' for c in channels)
