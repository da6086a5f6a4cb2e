"""Legacy color descriptor strings.

Older persisted data stores colors as a space-separated description naming a
color space followed by the channel values, such as::

    UIDeviceRGBColorSpace 1 0 0 1
    UIDeviceWhiteColorSpace 0.5 1

Parsing these never fails: anything unrecognised is logged and read as
transparent black.

"""
import logging
import math

from .color import Color
from .text import to_failsafe_float

logger = logging.getLogger(__name__)

RGB_SPACE = 'UIDeviceRGBColorSpace'
WHITE_SPACE = 'UIDeviceWhiteColorSpace'

# Number of space-separated fields, including the color space name
FIELD_COUNTS = {
    RGB_SPACE: 5,
    WHITE_SPACE: 3,
}


def is_legacy_descriptor(text: str) -> bool:
    """Return True if text names a known legacy color space."""
    return text.split(' ', 1)[0] in FIELD_COUNTS


def _channel(field: str) -> float:
    value = to_failsafe_float(field)
    return value if math.isfinite(value) else 0.0


def color_from_legacy_descriptor(text: str) -> Color:
    """Parse a legacy color descriptor.

    Malformed or non-finite channel values are read as 0.

    """
    if not isinstance(text, str):
        logger.warning("Not an RGB or grayscale color: %r", text)
        return Color.clear()

    fields = text.split(' ')
    space, *values = fields
    expected = FIELD_COUNTS.get(space)
    if expected is None:
        logger.warning("Not an RGB or grayscale color: %r", text)
        return Color.clear()
    if len(fields) != expected:
        logger.warning("Bad color format: %r", text)
        return Color.clear()

    values = [_channel(v) for v in values]
    if space == RGB_SPACE:
        return Color(*values)
    return Color.white(*values)


def _format_channel(v: float) -> str:
    v = float(v)
    return str(int(v)) if v.is_integer() else repr(v)


def legacy_descriptor_from_color(color: Color) -> str:
    """Write a color as a legacy descriptor."""
    color = Color(*color)
    if color.is_grayscale:
        space, values = WHITE_SPACE, (color.r, color.a)
    else:
        space, values = RGB_SPACE, color
    return ' '.join([space, *map(_format_channel, values)])
