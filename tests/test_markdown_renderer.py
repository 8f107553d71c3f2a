# tests/test_markdown_renderer.py
import pytest

from mdpad.services.markdown_renderer import MarkdownRenderer


@pytest.fixture
def renderer_mathjax() -> MarkdownRenderer:
    # Default engine is MathJax
    return MarkdownRenderer()


@pytest.fixture
def renderer_katex() -> MarkdownRenderer:
    return MarkdownRenderer(math_engine="katex")


def test_renderer_basic_html(renderer_mathjax: MarkdownRenderer):
    html = renderer_mathjax.to_html("# Title\n\nSome **bold** text.")
    # <h1 ...>Title</h1> (toc may add id attrs)
    assert "<h1" in html and "Title" in html
    assert "<strong>" in html
    # Template + CSS present
    assert html.lower().startswith("<!doctype html")
    assert "<style>" in html


def test_body_fragment_has_no_page_chrome(renderer_mathjax: MarkdownRenderer):
    body = renderer_mathjax.to_html_body("Some *text*")
    assert body.startswith("<p>")
    assert "<em>text</em>" in body
    assert "<html" not in body.lower()
    assert "MathJax" not in body


def test_renderer_code_block(renderer_mathjax: MarkdownRenderer):
    md = "```python\nprint('x')\n```"
    html = renderer_mathjax.to_html(md)
    # codehilite may wrap as <div class="codehilite"><pre><code>...
    assert ("<pre" in html or "<code" in html) and "print" in html


def test_inline_math_is_wrapped_for_mathjax(renderer_mathjax: MarkdownRenderer):
    html = renderer_mathjax.to_html(r"Euler: $e^{i\pi}+1=0$.")

    assert 'class="arithmatex"' in html
    assert 'id="MathJax-script"' in html
    assert "window.MathJax" in html


def test_katex_assets(renderer_katex: MarkdownRenderer):
    html = renderer_katex.to_html(r"Inline: $a^2 + b^2 = c^2$")

    assert "katex.min.css" in html
    assert "auto-render.min.js" in html
    assert "renderMathInElement" in html

    # MathJax assets should NOT be present for KaTeX
    assert 'id="MathJax-script"' not in html


def test_math_not_processed_inside_code_blocks(renderer_mathjax: MarkdownRenderer):
    md = '```python\ns = "$x$"\nprint(s)\n```'
    body = renderer_mathjax.to_html_body(md)
    assert "arithmatex" not in body
    assert "$x$" in body


def test_tables_from_extra(renderer_mathjax: MarkdownRenderer):
    body = renderer_mathjax.to_html_body("| a | b |\n|---|---|\n| 1 | 2 |")
    assert "<table>" in body and "<td>1</td>" in body
