"""Render classified guide blocks as Markdown lines."""

from __future__ import annotations

from typing import Iterable, List

from ..models import ArticleBlocks, Block, BlockKind, ConverterOptions

CODE_FENCE = "```"


def emit_block(block: Block, options: ConverterOptions) -> List[str]:
    """Return the output lines for one block (empty for dropped blocks)."""

    if block.kind is BlockKind.HEADING:
        return [f"### {block.text}", ""]
    if block.kind is BlockKind.CODE_EXAMPLE:
        return [
            f"{CODE_FENCE}{options.code_language}",
            f"# {block.text}",
            *block.code_lines,
            CODE_FENCE,
            "",
        ]
    if block.kind in (BlockKind.PLAIN_TEXT, BlockKind.LINK_ANNOTATED):
        return [block.text, ""]
    return []


def emit_articles(
    articles: Iterable[ArticleBlocks], options: ConverterOptions
) -> List[str]:
    lines: List[str] = []
    for article in articles:
        for block in article.blocks:
            lines.extend(emit_block(block, options))
    return lines


def join_lines(lines: Iterable[str]) -> str:
    """Terminate every line with a newline, matching ``puts`` output."""

    return "".join(f"{line}\n" for line in lines)
