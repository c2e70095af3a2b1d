"""Walk a string one logical character at a time.

Python strings built with ``surrogatepass`` or ``surrogateescape`` can carry
UTF-16 surrogate code points. Such strings cannot be encoded to UTF-8, so the
fallback path sanitizes them here before base64-encoding: valid high/low
pairs are fused into the astral character they stand for and lone halves
become a single space.
"""
from __future__ import annotations

from typing import Iterator

from slugkit.exceptions import CoherenceError

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)


def _combine(high: int, low: int) -> str:
    return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))


def read_char(text: str, index: int) -> tuple[str, int]:
    """Return the logical character starting at ``index``.

    Returns a ``(char, last_index)`` tuple where ``last_index`` is the index
    of the last code point consumed: ``index`` itself, or ``index + 1`` when a
    surrogate pair was fused.
    """
    if not 0 <= index < len(text):
        raise CoherenceError(f"Index {index} out of range for string {text!r}")

    code = ord(text[index])
    if code not in HIGH_SURROGATES and code not in LOW_SURROGATES:
        return text[index], index

    if code in HIGH_SURROGATES:
        if index + 1 >= len(text):
            return " ", index
        following = ord(text[index + 1])
        if following not in LOW_SURROGATES:
            return " ", index
        return _combine(code, following), index + 1

    if index == 0:
        return " ", index
    if ord(text[index - 1]) not in HIGH_SURROGATES:
        return " ", index

    # A left-to-right walk consumes the pair at its high half, so landing on
    # the low half of a valid pair means the caller lost track of the index.
    raise CoherenceError(f"Index {index} of {text!r} points inside a surrogate pair")


def iter_chars(text: str) -> Iterator[str]:
    index = 0
    while index < len(text):
        char, index = read_char(text, index)
        yield char
        index += 1


def sanitize_surrogates(text: str) -> str:
    """Replace lone surrogates with spaces and fuse valid surrogate pairs."""
    return "".join(iter_chars(text))
