"""Split text into user-perceived characters.

This is a pragmatic subset of extended grapheme clustering: enough to keep
accents, emoji modifiers, ZWJ sequences and flags inside a single fragment.
"""

import unicodedata
from typing import Iterator, List

_ZWJ = "\u200d"
_EXTENDING_CATEGORIES = ("Mn", "Mc", "Me")


def _is_variation_selector(char: str) -> bool:
    code = ord(char)
    return 0xFE00 <= code <= 0xFE0F or 0xE0100 <= code <= 0xE01EF


def _is_skin_tone(char: str) -> bool:
    return 0x1F3FB <= ord(char) <= 0x1F3FF


def _is_regional_indicator(char: str) -> bool:
    return 0x1F1E6 <= ord(char) <= 0x1F1FF


def _is_tag(char: str) -> bool:
    # Emoji tag sequences (subdivision flags).
    return 0xE0020 <= ord(char) <= 0xE007F


def _is_control(char: str) -> bool:
    return unicodedata.category(char) == "Cc"


def _extends(char: str) -> bool:
    return (
        unicodedata.category(char) in _EXTENDING_CATEGORIES
        or _is_variation_selector(char)
        or _is_skin_tone(char)
        or _is_tag(char)
        or char == _ZWJ
    )


def iter_graphemes(text: str) -> Iterator[str]:
    """Yield the user-perceived characters of ``text`` in order.

    Joining the yielded clusters reproduces ``text`` exactly.
    """
    cluster = ""
    for char in text:
        if not cluster:
            cluster = char
            continue

        previous = cluster[-1]
        if previous == "\r" and char == "\n":
            cluster += char
        elif _is_control(previous) or _is_control(char):
            yield cluster
            cluster = char
        elif previous == _ZWJ or _extends(char):
            cluster += char
        elif (
            _is_regional_indicator(char)
            and _is_regional_indicator(previous)
            and len(cluster) == 1
        ):
            cluster += char
        else:
            yield cluster
            cluster = char

    if cluster:
        yield cluster


def split_graphemes(text: str) -> List[str]:
    return list(iter_graphemes(text))
