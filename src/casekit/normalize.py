"""Unicode normalisation applied before words are segmented."""

from __future__ import annotations

import logging
import re
import unicodedata

__all__ = ["normalize", "strip_marks"]


LOGGER = logging.getLogger(__name__)

_LATIN_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]+")


def strip_marks(text: str, *, unicode: bool = True) -> str:
    """Remove combining marks from already decomposed ``text``.

    With ``unicode`` enabled every code point in general category ``M`` is
    dropped. Otherwise only the combining diacritical marks block is removed.
    """

    if not unicode:
        return _LATIN_COMBINING_MARKS.sub("", text)
    return "".join(char for char in text if not unicodedata.category(char).startswith("M"))


def normalize(text: str, *, unicode: bool = True) -> str:
    """Trim ``text``, decompose it with NFKD and strip combining marks.

    ``"  Café "`` becomes ``"Cafe"``; compatibility characters such as the
    ``"ﬁ"`` ligature are expanded to their components.
    """

    text = text.strip()
    if not text:
        return ""

    text = unicodedata.normalize("NFKD", text)
    if not unicode:
        LOGGER.debug("stripping marks with the latin fallback table")
    return strip_marks(text, unicode=unicode)
