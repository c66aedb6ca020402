"""Join segmented words into a target casing style."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

__all__ = ["Style", "render"]


class Style(str, Enum):
    """Output styles understood by :func:`render`."""

    KEBAB = "kebab"
    CAMEL = "camel"
    DOT = "dot"

    @property
    def separator(self) -> str:
        return _SEPARATORS[self]


_SEPARATORS = {
    Style.KEBAB: "-",
    Style.CAMEL: "",
    Style.DOT: ".",
}


def _capitalize(word: str) -> str:
    head, tail = word[:1], word[1:]
    if head.isalpha():
        head = head.upper()
    return head + tail.lower()


def render(words: Sequence[str], style: Style | str) -> str:
    """Render ``words`` in ``style``.

    ``style`` may be a :class:`Style` member or its value, e.g. ``"kebab"``.
    Kebab and dot output is fully lowercase. Camel output lowercases the first
    word and capitalises the first letter of every following word; a word
    starting with a digit keeps the digit and only has its letters lowercased.
    """

    try:
        style = Style(style)
    except ValueError:
        choices = ", ".join(member.value for member in Style)
        raise ValueError(f"unknown style '{style}', expected one of: {choices}") from None

    if not words:
        return ""

    if style is Style.CAMEL:
        first, *rest = words
        return first.lower() + "".join(_capitalize(word) for word in rest)

    return style.separator.join(word.lower() for word in words)
