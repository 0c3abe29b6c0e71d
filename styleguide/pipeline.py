"""High-level orchestration for guide conversion."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

try:
    from bs4 import BeautifulSoup  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'beautifulsoup4'. Install with pip install"
        " beautifulsoup4 lxml"
    ) from exc

from .classify import classify_article
from .formats import markdown as markdown_format
from .models import (
    ArticleBlocks,
    ConversionSummary,
    ConverterOptions,
    GuideInputError,
    GuideOutputError,
)


def read_guide_html(path: Path | str) -> str:
    """Read the saved guide page, raising GuideInputError on failure."""

    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise GuideInputError(f"Input HTML not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise GuideInputError(f"Unable to read {path}: {exc}") from exc


def classify_document(
    html_text: str, options: ConverterOptions
) -> List[ArticleBlocks]:
    soup = BeautifulSoup(html_text, "lxml")
    return [
        classify_article(article, options)
        for article in soup.find_all("article")
    ]


def collect_warnings(articles: List[ArticleBlocks]) -> List[str]:
    return [
        block.warning
        for article in articles
        for block in article.blocks
        if block.warning
    ]


def render_guide(
    html_text: str, options: Optional[ConverterOptions] = None
) -> List[str]:
    """Return the Markdown lines for a guide page without touching disk."""

    resolved = options or ConverterOptions()
    articles = classify_document(html_text, resolved)
    return markdown_format.emit_articles(articles, resolved)


def convert_guide(
    input_html: Path | str,
    output_path: Path | str,
    *,
    options: Optional[ConverterOptions] = None,
) -> ConversionSummary:
    """Convert the guide at ``input_html`` into Markdown at ``output_path``.

    Every line is built in memory before the output file is touched, so an
    input or structure error leaves any existing output as it was.
    """

    resolved = options or ConverterOptions()
    output_path = Path(output_path)

    html_text = read_guide_html(input_html)
    articles = classify_document(html_text, resolved)
    warnings = collect_warnings(articles)
    for warning in warnings:
        print(f"⚠️ {warning}")

    lines = markdown_format.emit_articles(articles, resolved)
    markdown_text = markdown_format.join_lines(lines)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markdown_text, encoding="utf-8")
    except OSError as exc:
        raise GuideOutputError(
            f"Unable to write {output_path}: {exc}"
        ) from exc
    print(f"✅ Guide written: {output_path}")

    return ConversionSummary(
        output_path=output_path,
        article_count=len(articles),
        line_count=len(lines),
        warnings=warnings,
        markdown=markdown_text,
    )
