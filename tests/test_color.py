"""Test for color conversion."""
import numpy as np
import pytest
from pytest import approx

from hexcolor import Color, InvalidFormat
from hexcolor.color import convert_color, convert_color_rgb


def test_color_name():
    """Convert from a color name to an np.array."""
    assert np.array_equal(
        convert_color('black'),
        np.array([0, 0, 0, 1], dtype='f4')
    )


def test_color_3tuple():
    """Convert from a 3-tuple to an np.array."""
    assert np.array_equal(
        convert_color((0, 0, 1)),
        np.array([0, 0, 1, 1], dtype='f4')
    )


def test_color_object():
    """A Color converts to an array of its channels."""
    arr = convert_color(Color(0.25, 0.5, 0.75, 1.0))
    assert arr.dtype == np.float32
    assert np.array_equal(arr, np.array([0.25, 0.5, 0.75, 1.0], dtype='f4'))


def test_color_hex():
    """Convert from a hex color code."""
    assert convert_color('#FF0088') == approx([1, 0, 136 / 255, 1])


def test_color_legacy_descriptor():
    """Convert from a legacy color descriptor."""
    assert convert_color('UIDeviceWhiteColorSpace 0.5 1') == approx(
        [0.5, 0.5, 0.5, 1]
    )


def test_malformed_hex():
    """A string that looks like a hex code but isn't one is an error."""
    with pytest.raises(InvalidFormat, match='Malformed hex color'):
        convert_color('#12')


def test_unknown_name():
    """Unknown color names raise ValueError."""
    with pytest.raises(ValueError):
        convert_color('notacolor')


def test_bad_tuple_length():
    """Tuples must have 3 or 4 channels."""
    with pytest.raises(ValueError):
        convert_color((1, 0))


def test_rgb():
    """We can get an RGB array for an opaque color."""
    assert convert_color_rgb('#F00') == approx([1, 0, 0])


def test_rgb_alpha():
    """Colors with transparency cannot be converted to RGB."""
    with pytest.raises(ValueError):
        convert_color_rgb('#FF000080')


def test_from_rgba_int():
    """Unpack a color from a 32-bit integer, red in the highest byte."""
    assert Color.from_rgba_int(0xFF008000) == Color(1.0, 0.0, 128 / 255, 0.0)


def test_from_rgb_int():
    """Colors from a 24-bit integer are opaque."""
    assert Color.from_rgb_int(0x00FF00) == Color(0.0, 1.0, 0.0, 1.0)


def test_white():
    """Shades of grey have equal channels."""
    grey = Color.white(0.5, 0.25)
    assert grey == Color(0.5, 0.5, 0.5, 0.25)
    assert grey.is_grayscale
    assert not Color(1, 0, 0).is_grayscale


def test_clear():
    """The clear color is transparent black."""
    assert Color.clear() == (0, 0, 0, 0)
