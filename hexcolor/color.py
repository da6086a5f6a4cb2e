"""The Color type and color conversion functions."""
from typing import NamedTuple, Sequence, Union

import numpy as np
from pygame import Color as PygameColor


class Color(NamedTuple):
    """An immutable RGBA color.

    Each channel is a fraction in the range 0.0 to 1.0.

    """
    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgba_int(cls, rgba: int) -> 'Color':
        """Unpack a color from an integer of the form 0xRRGGBBAA."""
        return cls(
            ((rgba & 0xFF000000) >> 24) / 255.0,
            ((rgba & 0x00FF0000) >> 16) / 255.0,
            ((rgba & 0x0000FF00) >> 8) / 255.0,
            (rgba & 0x000000FF) / 255.0,
        )

    @classmethod
    def from_rgb_int(cls, rgb: int) -> 'Color':
        """Unpack an opaque color from an integer of the form 0xRRGGBB."""
        return cls(
            ((rgb & 0xFF0000) >> 16) / 255.0,
            ((rgb & 0x00FF00) >> 8) / 255.0,
            (rgb & 0x0000FF) / 255.0,
            1.0,
        )

    @classmethod
    def white(cls, w: float, a: float = 1.0) -> 'Color':
        """Construct a shade of grey."""
        return cls(w, w, w, a)

    @classmethod
    def clear(cls) -> 'Color':
        """Fully transparent black."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @property
    def is_grayscale(self) -> bool:
        """True if the red, green and blue channels are equal."""
        return self.r == self.g == self.b

    def to_array(self) -> np.ndarray:
        """Get the color as a float32 array of (r, g, b, a)."""
        return np.array(self, dtype='f4')


ColorLike = Union[Color, str, Sequence[float]]


def _is_hex_prefixed(c: str) -> bool:
    return c.strip().upper().startswith(('#', '0X'))


def convert_color(c: ColorLike) -> np.ndarray:
    """Convert a color to an RGBA array.

    Strings may be hex color codes, legacy color descriptors or the name of
    a color known to pygame.

    """
    from .hexcodec import InvalidFormat, color_from_hex
    from .legacy import color_from_legacy_descriptor, is_legacy_descriptor

    if isinstance(c, Color):
        return c.to_array()
    if isinstance(c, str):
        if _is_hex_prefixed(c):
            try:
                return color_from_hex(c, strict=True).to_array()
            except InvalidFormat:
                raise InvalidFormat(f"Malformed hex color {c!r}") from None
        if is_legacy_descriptor(c):
            return color_from_legacy_descriptor(c).to_array()
        try:
            col = PygameColor(c)
        except ValueError:
            try:
                return color_from_hex(c, strict=True).to_array()
            except InvalidFormat:
                raise ValueError(f"Unknown color {c!r}") from None
        return np.array(memoryview(col), dtype='u1').astype('f4') / 255.0

    c = tuple(c)
    if not 3 <= len(c) <= 4:
        raise ValueError(f"Invalid color length {len(c)}")
    return np.array(c + (1,) * (4 - len(c)), dtype='f4')


def convert_color_rgb(c: ColorLike) -> np.ndarray:
    """Convert an opaque color to an RGB array.

    Raise ValueError for colors with any transparency.

    """
    *rgb, alpha = convert_color(c)
    if not np.isclose(alpha, 1.0, rtol=0, atol=1e-4):
        raise ValueError(f"{c!r} is not opaque (alpha {alpha:.3f})")
    return np.array(rgb, dtype='f4')
