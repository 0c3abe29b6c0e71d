"""Turn guide articles into tagged blocks before any Markdown is emitted."""

from __future__ import annotations

import re
from typing import Any, List, Optional

from bs4 import Comment, Tag  # type: ignore[import-not-found]
from markdownify import MarkdownConverter  # type: ignore[import-not-found]

from .models import (
    ArticleBlocks,
    Block,
    BlockKind,
    ConverterOptions,
    GuideStructureError,
)

WHITESPACE_RUN_RE = re.compile(r"\s\s+")


def normalize_text(text: str) -> str:
    """Strip, drop line breaks and collapse whitespace runs to one space."""

    return WHITESPACE_RUN_RE.sub(" ", text.strip().replace("\n", ""))


def article_title(article: Tag) -> str:
    """Return the text of the first link inside the article's ``h1``."""

    heading = article.find("h1")
    link = heading.find("a") if heading is not None else None
    if link is None:
        raise GuideStructureError(
            "Article has no 'h1 a' title element: "
            f"{normalize_text(article.get_text())[:60]!r}"
        )
    return normalize_text(link.get_text())


def class_tokens(paragraph: Tag) -> List[str]:
    value: Any = paragraph.get("class") or []
    if isinstance(value, str):
        return value.split()
    return list(value)


def child_elements(paragraph: Tag) -> List[Tag]:
    return paragraph.find_all(True, recursive=False)


def find_code_block(paragraph: Tag) -> Optional[Tag]:
    """Locate the ``pre`` that belongs to a code-example paragraph."""

    sibling = paragraph.find_next_sibling()
    if sibling is None:
        return None
    if sibling.name == "pre":
        return sibling
    return sibling.find("pre")


def split_code_lines(code: str) -> List[str]:
    lines = code.split("\n")
    while lines and not lines[-1]:
        lines.pop()
    return lines


class LinkConverter(MarkdownConverter):
    """Render anchors as ``[visible text](href)`` and nothing more.

    The title attribute is ignored and inline markup inside the anchor is
    flattened to its text.
    """

    def convert_a(self, el, text, *args, **kwargs):
        visible = el.get_text()
        href = el.get("href")
        if not href:
            return visible
        return f"[{visible}]({href})"


LINK_CONVERTER = LinkConverter(
    autolinks=False,
    escape_asterisks=False,
    escape_underscores=False,
    escape_misc=False,
)


def render_link(anchor: Tag) -> str:
    return LINK_CONVERTER.convert(str(anchor))


def render_linked_text(paragraph: Tag) -> str:
    """Return paragraph text with each child link rewritten as Markdown."""

    parts: List[str] = []
    for child in paragraph.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, Tag):
            if child.name == "a":
                parts.append(render_link(child))
            else:
                parts.append(child.get_text())
        else:
            parts.append(str(child))
    return "".join(parts)


def is_boilerplate(text: str, markers: tuple[str, ...]) -> bool:
    collapsed = " ".join(text.split())
    return any(marker in collapsed for marker in markers)


def classify_paragraph(
    paragraph: Tag,
    options: ConverterOptions,
    *,
    source: str,
) -> Block:
    """Assign one paragraph to exactly one ``BlockKind``."""

    text = paragraph.get_text()

    if set(class_tokens(paragraph)) & set(options.code_marker_classes):
        code_block = find_code_block(paragraph)
        if code_block is None:
            message = f"No code block follows code example {source}"
            if options.on_missing_code == "fail":
                raise GuideStructureError(message)
            return Block(kind=BlockKind.SKIP, source=source, warning=message)
        return Block(
            kind=BlockKind.CODE_EXAMPLE,
            text=normalize_text(text),
            code_lines=split_code_lines(code_block.get_text()),
            source=source,
        )

    if is_boilerplate(text, options.skip_markers):
        return Block(kind=BlockKind.SKIP, source=source)

    children = child_elements(paragraph)
    if not children:
        return Block(
            kind=BlockKind.PLAIN_TEXT,
            text=normalize_text(text),
            source=source,
        )

    if children[0].name == "a":
        return Block(
            kind=BlockKind.LINK_ANNOTATED,
            text=normalize_text(render_linked_text(paragraph)),
            source=source,
        )

    return Block(
        kind=BlockKind.UNRECOGNIZED,
        source=source,
        warning=(
            f"Dropped {source}: first child is <{children[0].name}>, "
            "not a link"
        ),
    )


def classify_article(article: Tag, options: ConverterOptions) -> ArticleBlocks:
    """Classify an article into its heading block and paragraph blocks."""

    title = article_title(article)
    blocks: List[Block] = [
        Block(kind=BlockKind.HEADING, text=title, source=repr(title))
    ]
    for index, paragraph in enumerate(article.find_all("p"), start=1):
        blocks.append(
            classify_paragraph(
                paragraph,
                options,
                source=f"paragraph {index} of {title!r}",
            )
        )
    return ArticleBlocks(title=title, blocks=blocks)
