"""Configuration shared by the conversion functions and the CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ConversionConfig:
    """Options controlling how text is classified before rendering.

    Attributes
    ----------
    unicode:
        When ``True`` (the default) letters, digits and combining marks are
        recognised through their Unicode general category. When ``False`` the
        converters fall back to fixed Latin tables: ``A-Z``, ``a-z`` and
        ``0-9`` are word characters and only the combining diacritical marks
        block (``U+0300`` to ``U+036F``) is stripped. Accented Latin text still
        degrades to its base letters, other scripts are treated as delimiters.
    """

    unicode: bool = True

    @classmethod
    def ascii(cls) -> "ConversionConfig":
        """Return a configuration using the Latin fallback tables."""

        return cls(unicode=False)

    @property
    def character_classes(self) -> str:
        return "unicode" if self.unicode else "ascii"
