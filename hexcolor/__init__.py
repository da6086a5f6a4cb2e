"""hexcolor, conversion between hex color codes, legacy descriptors and RGBA."""
import os

# pygame prints a banner on import; a library should not talk to its users.
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'

from . import text
from .color import Color, convert_color, convert_color_rgb
from .hexcodec import InvalidFormat, color_from_hex, hex_from_color
from .legacy import color_from_legacy_descriptor, legacy_descriptor_from_color

__version__ = (1, 0, 0)
__all__ = [
    'Color',
    'InvalidFormat',
    'color_from_hex', 'hex_from_color',
    'color_from_legacy_descriptor', 'legacy_descriptor_from_color',
    'convert_color', 'convert_color_rgb',
    'text',
]
