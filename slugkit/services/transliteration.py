"""The transliteration pass.

Each position of the input goes through, in order:

1. the multi-character map, longest key length first;
2. the locale table;
3. the character map (a delimiter inside the replacement becomes a space);
4. the delimiter itself, which becomes a space so that it survives stripping;
5. the mode's disallowed-character filter.

The assembled string is then run through the ``remove`` pattern, trimmed,
has its whitespace runs collapsed to the delimiter and is finally
lower-cased. Collapsing comes after every substitution so that delimiters
introduced by the tables are normalized the same way as literal whitespace.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from re import Pattern
from typing import Mapping, Optional

from slugkit.exceptions import InvalidArgumentError

# ECMAScript whitespace and line terminators. Python's \s differs: it lacks
# U+FEFF and includes U+001C..U+001F and U+0085.
WHITESPACE = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Everything except ASCII word characters, whitespace, hyphen, dot and tilde
RFC3986_DISALLOWED = re.compile(f"[^A-Za-z0-9_{WHITESPACE}\\-.~]")
# Everything except ASCII letters, digits and whitespace
PRETTY_DISALLOWED = re.compile(f"[^A-Za-z0-9{WHITESPACE}]")

WHITESPACE_RUN = re.compile(f"[{WHITESPACE}]+")


@dataclass(frozen=True)
class ResolvedOptions:
    mode: str
    replacement: str
    charmap: Mapping[str, str]
    multicharmap: Mapping[str, str]
    locale_map: Mapping[str, str]
    remove: Optional[Pattern[str]] = None
    lower: bool = True
    trim: bool = True
    fallback: bool = True


def disallowed_pattern(mode: str) -> Pattern[str]:
    return RFC3986_DISALLOWED if mode == "rfc3986" else PRETTY_DISALLOWED


def key_lengths(multicharmap: Mapping[str, str]) -> list[int]:
    """Distinct key lengths of ``multicharmap``, longest first."""
    return sorted({len(key) for key in multicharmap if key}, reverse=True)


def _match_sequence(
    text: str, index: int, lengths: list[int], multicharmap: Mapping[str, str]
) -> tuple[Optional[str], int]:
    for length in lengths:
        value = multicharmap.get(text[index:index + length])
        if value:
            return value, length
    return None, 1


def _map_char(char: str, options: ResolvedOptions, disallowed: Pattern[str]) -> str:
    value = options.locale_map.get(char)
    if value:
        return value

    value = options.charmap.get(char)
    if value:
        return value.replace(options.replacement, " ")

    if options.replacement in char:
        # keep the delimiter even when the mode would strip it
        return char.replace(options.replacement, " ", 1)

    return disallowed.sub("", char)


def transliterate(text: str, options: ResolvedOptions) -> str:
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"slug() requires a string argument, received {type(text).__name__}"
        )

    lengths = key_lengths(options.multicharmap)
    disallowed = disallowed_pattern(options.mode)

    pieces: list[str] = []
    index = 0
    while index < len(text):
        piece, consumed = _match_sequence(text, index, lengths, options.multicharmap)
        if piece is None:
            piece = _map_char(text[index], options, disallowed)
        pieces.append(piece)
        index += consumed
    result = "".join(pieces)

    if options.remove is not None:
        result = options.remove.sub("", result)
    if options.trim:
        result = result.strip(WHITESPACE)
    result = WHITESPACE_RUN.sub(lambda _: options.replacement, result)
    if options.lower:
        result = result.lower()
    return result
