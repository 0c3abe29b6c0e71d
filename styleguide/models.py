"""Shared dataclasses and errors for guide conversion."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Literal, Optional, Tuple

MissingCodePolicy = Literal["fail", "skip"]

DEFAULT_CODE_LANGUAGE = "ruby"
DEFAULT_CODE_MARKER_CLASSES: Tuple[str, ...] = (
    "wrong",
    "correct",
    "base",
    "good",
    "bad",
)
DEFAULT_SKIP_MARKERS: Tuple[str, ...] = (
    "Discuss this guideline",
    "Learn more about",
    "More about",
)


class GuideError(Exception):
    """Base class for errors raised while converting a guide."""


class GuideInputError(GuideError):
    """Raised when the input HTML cannot be read."""


class GuideOutputError(GuideError):
    """Raised when the Markdown output cannot be written."""


class GuideStructureError(GuideError):
    """Raised when the document lacks an element the converter relies on."""


class BlockKind(enum.Enum):
    HEADING = "heading"
    CODE_EXAMPLE = "code_example"
    SKIP = "skip"
    PLAIN_TEXT = "plain_text"
    LINK_ANNOTATED = "link_annotated"
    UNRECOGNIZED = "unrecognized"


def _empty_lines() -> List[str]:
    return []


@dataclass(slots=True)
class Block:
    """One classified unit of an article, ready for emission."""

    kind: BlockKind
    text: str = ""
    code_lines: List[str] = field(default_factory=_empty_lines)
    source: str = ""
    warning: Optional[str] = None


@dataclass(slots=True)
class ArticleBlocks:
    """The heading and paragraph blocks of one article, in document order."""

    title: str
    blocks: List[Block]


@dataclass(slots=True)
class ConverterOptions:
    """Knobs that control classification and emission."""

    code_language: str = DEFAULT_CODE_LANGUAGE
    code_marker_classes: Tuple[str, ...] = DEFAULT_CODE_MARKER_CLASSES
    skip_markers: Tuple[str, ...] = DEFAULT_SKIP_MARKERS
    on_missing_code: MissingCodePolicy = "fail"


@dataclass(slots=True)
class ConversionSummary:
    """Represents the outcome of convert_guide for callers."""

    output_path: Path
    article_count: int
    line_count: int
    warnings: List[str]
    markdown: str
