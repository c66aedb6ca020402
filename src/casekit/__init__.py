"""Convert arbitrary text to kebab-case, camelCase and dot.case.

All converters share one normalisation and word segmentation pipeline: the
input is decomposed with NFKD, combining marks are stripped, words are split on
delimiters, case changes and letter/digit switches, and the words are then
joined in the requested style.
"""

from __future__ import annotations

from .config import ConversionConfig
from .convert import convert, describe, split_words, to_camel_case, to_dot_case, to_kebab_case
from .errors import InvalidArgumentTypeError
from .normalize import normalize
from .render import Style, render
from .schema import ConversionResult
from .segment import segment

__all__ = [
    "ConversionConfig",
    "ConversionResult",
    "InvalidArgumentTypeError",
    "Style",
    "convert",
    "describe",
    "normalize",
    "render",
    "segment",
    "split_words",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
]

__version__ = "0.1.0"
