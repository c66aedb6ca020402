"""Split normalised text into the words shared by every output style.

Boundaries are found with a handful of passes over adjacent characters:

1. a lowercase letter or digit followed by an uppercase letter (``fooBar``);
2. the last capital of an acronym followed by a capitalised word
   (``XMLHttp`` splits into ``XML`` and ``Http``);
3. any switch between letters and digits (``version2alpha``);
4. runs of anything that is neither a letter nor a digit, which are dropped.
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Sequence

__all__ = ["segment", "classify"]


UPPER = "upper"
LOWER = "lower"
LETTER = "letter"
DIGIT = "digit"
DELIMITER = "delimiter"

_LETTERS = frozenset({UPPER, LOWER, LETTER})


def _classify_unicode(char: str) -> str:
    category = unicodedata.category(char)
    if category == "Lu":
        return UPPER
    if category == "Ll":
        return LOWER
    if category.startswith("L"):
        return LETTER
    if category.startswith("N"):
        return DIGIT
    return DELIMITER


def _classify_ascii(char: str) -> str:
    if "A" <= char <= "Z":
        return UPPER
    if "a" <= char <= "z":
        return LOWER
    if "0" <= char <= "9":
        return DIGIT
    return DELIMITER


def classify(text: str, *, unicode: bool = True) -> list[str]:
    """Return the character class of every character in ``text``."""

    classifier: Callable[[str], str] = _classify_unicode if unicode else _classify_ascii
    return [classifier(char) for char in text]


def _case_breaks(classes: Sequence[str]) -> set[int]:
    return {
        index
        for index in range(1, len(classes))
        if classes[index] == UPPER and classes[index - 1] in (LOWER, DIGIT)
    }


def _acronym_breaks(classes: Sequence[str]) -> set[int]:
    return {
        index
        for index in range(1, len(classes) - 1)
        if classes[index - 1] == UPPER and classes[index] == UPPER and classes[index + 1] == LOWER
    }


def _digit_breaks(classes: Sequence[str]) -> set[int]:
    breaks: set[int] = set()
    for index in range(1, len(classes)):
        previous, current = classes[index - 1], classes[index]
        if (previous in _LETTERS and current == DIGIT) or (previous == DIGIT and current in _LETTERS):
            breaks.add(index)
    return breaks


_PASSES = (_case_breaks, _acronym_breaks, _digit_breaks)


def segment(text: str, *, unicode: bool = True) -> tuple[str, ...]:
    """Split ``text`` into words.

    ``text`` is expected to be the output of :func:`casekit.normalize.normalize`.
    Delimiters never appear in the result and an input without letters or
    digits yields an empty tuple.
    """

    classes = classify(text, unicode=unicode)
    breaks: set[int] = set()
    for boundary_pass in _PASSES:
        breaks |= boundary_pass(classes)

    words: list[str] = []
    current: list[str] = []
    for index, (char, char_class) in enumerate(zip(text, classes)):
        if char_class == DELIMITER:
            if current:
                words.append("".join(current))
                current = []
            continue
        if index in breaks and current:
            words.append("".join(current))
            current = []
        current.append(char)

    if current:
        words.append("".join(current))
    return tuple(words)
