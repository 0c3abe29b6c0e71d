"""Convert saved style-guide pages into a Markdown guide."""

from .models import (
    BlockKind,
    ConversionSummary,
    ConverterOptions,
    GuideError,
    GuideInputError,
    GuideOutputError,
    GuideStructureError,
)
from .pipeline import convert_guide, render_guide

__all__ = [
    "BlockKind",
    "ConversionSummary",
    "ConverterOptions",
    "GuideError",
    "GuideInputError",
    "GuideOutputError",
    "GuideStructureError",
    "convert_guide",
    "render_guide",
]
