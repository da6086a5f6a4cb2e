"""Text helpers used to normalize color input.

All of these are total: they never raise for string input, returning the
text unchanged (or zero, for the number parsers) when there is nothing to do.

"""
import re

INT_PATTERN = re.compile(r'[+-]?\d+', re.ASCII)

FLOAT_PATTERN = re.compile(
    r'[+-]?((\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|inf|infinity|nan)',
    re.ASCII | re.IGNORECASE
)


def trim(text: str) -> str:
    """Strip leading and trailing whitespace and newlines."""
    return text.strip()


def remove_prefix(text: str, prefix: str) -> str:
    """Return text without prefix, if it starts with it."""
    if prefix and text.startswith(prefix):
        return text[len(prefix):]
    return text


def remove_suffix(text: str, suffix: str) -> str:
    """Return text without suffix, if it ends with it."""
    if suffix and text.endswith(suffix):
        return text[:-len(suffix)]
    return text


def remove_first_occurrence(text: str, sub: str) -> str:
    """Remove the first occurrence of sub from text."""
    if not sub:
        return text
    return text.replace(sub, '', 1)


def to_failsafe_int(text: str) -> int:
    """Parse text as a decimal integer, or return 0."""
    if not isinstance(text, str):
        return 0
    text = trim(text)
    if not INT_PATTERN.fullmatch(text):
        return 0
    return int(text)


def to_failsafe_float(text: str) -> float:
    """Parse text as a float, or return 0.0.

    Only plain ASCII decimal and exponent notation is accepted, plus the
    names ``inf``, ``infinity`` and ``nan``.

    """
    if not isinstance(text, str):
        return 0.0
    text = trim(text)
    if not FLOAT_PATTERN.fullmatch(text):
        return 0.0
    return float(text)
