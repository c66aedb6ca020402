"""Structured representation of a conversion, used for JSON output."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .render import Style


class ConversionResult(BaseModel):
    """Outcome of converting one value into a casing style."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str = Field(..., description="The value as it was supplied.")
    style: Style = Field(..., description="Casing style the value was rendered in.")
    words: Tuple[str, ...] = Field(default_factory=tuple, description="Words found by the segmenter, in order.")
    result: str = Field(..., description="The rendered value.")
    character_classes: str = Field(default="unicode", description="Character tables used for segmentation.")


__all__ = ["ConversionResult"]
