"""
Pytest configuration for guide conversion tests.

Provides small saved-page fixtures shaped like the style guide the
converter was written for.
"""
from pathlib import Path

import pytest


def wrap_page(*articles: str) -> str:
    """Wrap article markup in a minimal saved HTML page."""
    body = "\n".join(articles)
    return f"<html><head><title>Guide</title></head><body>{body}</body></html>"


def article(title: str, *paragraphs: str) -> str:
    inner = "\n".join(paragraphs)
    return (
        f'<article><h1><a href="#{title.lower().replace(" ", "-")}">'
        f"{title}</a></h1>\n{inner}\n</article>"
    )


@pytest.fixture
def use_let_page() -> str:
    return wrap_page(
        article(
            "Use let",
            "<p>Do this.</p>",
            '<p class="good">Prefer let over instance variables</p>',
            '<div class="source"><pre>let(:foo) { Foo.new }</pre></div>',
        )
    )


@pytest.fixture
def guide_page() -> str:
    return wrap_page(
        article(
            "Describe your methods",
            "<p>Be clear about\n      what method you are   describing.</p>",
            '<p class="wrong">bad</p>',
            "<div><pre>describe 'the authenticate method' do\nend</pre></div>",
            '<p class="correct">good</p>',
            "<div><pre>describe '.authenticate' do\nend\n</pre></div>",
            "<p>Discuss this guideline &rarr;</p>",
        ),
        article(
            "Use contexts",
            '<p><a href="https://rspec.info/">Contexts</a> make tests clear.</p>',
            "<p>Learn more about <a href=\"https://example.com\">rspec</a></p>",
        ),
    )


@pytest.fixture
def write_page(tmp_path: Path):
    """Return a helper that writes HTML into tmp_path and returns its path."""
    def _write(html: str, name: str = "guide.html") -> Path:
        path = tmp_path / name
        path.write_text(html, encoding="utf-8")
        return path
    return _write
