"""Public conversion functions.

Every converter runs the same pipeline: the raw value is checked, normalised,
split into words and finally rendered. The converters only differ in the
:class:`~casekit.render.Style` they hand to the renderer.
"""

from __future__ import annotations

import logging

from .config import ConversionConfig
from .errors import InvalidArgumentTypeError
from .normalize import normalize
from .render import Style, render
from .schema import ConversionResult
from .segment import segment

__all__ = [
    "convert",
    "describe",
    "split_words",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
]


LOGGER = logging.getLogger(__name__)

_DEFAULT_CONFIG = ConversionConfig()


def _words(value: object, function: str, config: ConversionConfig | None) -> tuple[str, ...]:
    if not isinstance(value, str):
        raise InvalidArgumentTypeError(function, value)
    config = config or _DEFAULT_CONFIG
    words = segment(normalize(value, unicode=config.unicode), unicode=config.unicode)
    LOGGER.debug("%s: %d word(s) using %s classes", function, len(words), config.character_classes)
    return words


def split_words(value: object, *, config: ConversionConfig | None = None) -> tuple[str, ...]:
    """Return the words every style is built from."""

    return _words(value, "split_words", config)


def convert(value: object, style: Style | str, *, config: ConversionConfig | None = None) -> str:
    """Convert ``value`` to ``style``.

    Raises
    ------
    InvalidArgumentTypeError
        If ``value`` is not a :class:`str`.
    ValueError
        If ``style`` does not name a known style.
    """

    return render(_words(value, "convert", config), style)


def describe(value: object, style: Style | str, *, config: ConversionConfig | None = None) -> ConversionResult:
    """Convert ``value`` and return the words alongside the result."""

    config = config or _DEFAULT_CONFIG
    words = _words(value, "describe", config)
    result = render(words, style)
    return ConversionResult(
        source=value,
        style=Style(style),
        words=words,
        result=result,
        character_classes=config.character_classes,
    )


def to_kebab_case(value: object, *, config: ConversionConfig | None = None) -> str:
    """Return ``value`` as lowercase words joined by hyphens.

    >>> to_kebab_case("Hello World")
    'hello-world'
    """

    return render(_words(value, "to_kebab_case", config), Style.KEBAB)


def to_camel_case(value: object, *, config: ConversionConfig | None = None) -> str:
    """Return ``value`` in camelCase.

    >>> to_camel_case("XMLHttpRequest")
    'xmlHttpRequest'
    """

    return render(_words(value, "to_camel_case", config), Style.CAMEL)


def to_dot_case(value: object, *, config: ConversionConfig | None = None) -> str:
    """Return ``value`` as lowercase words joined by dots."""

    return render(_words(value, "to_dot_case", config), Style.DOT)
