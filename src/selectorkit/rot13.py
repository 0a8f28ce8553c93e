"""ROT13 letter substitution."""

from __future__ import annotations

import string

DEFAULT_MESSAGE = "Why did the chicken cross the road?"

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase

# Each ASCII letter maps to the letter 13 places later, wrapping around.
_ROT13_TABLE = str.maketrans(
    _LOWER + _UPPER,
    _LOWER[13:] + _LOWER[:13] + _UPPER[13:] + _UPPER[:13],
)


def encode_rot13(text: str) -> str:
    """Rotate every ASCII letter in *text* by 13 places, preserving case.

    Non-letters pass through unchanged, and encoding twice returns the input.

    >>> encode_rot13("Why did the chicken cross the road?")
    'Jul qvq gur puvpxra pebff gur ebnq?'
    """
    return text.translate(_ROT13_TABLE)
