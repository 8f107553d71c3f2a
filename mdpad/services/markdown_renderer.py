from __future__ import annotations

from typing import Literal

import markdown

from mdpad.domain.interfaces import IMarkdownRenderer
from mdpad.utils.constants import CSS_PREVIEW, HTML_TEMPLATE

MathEngine = Literal["mathjax", "katex"]

_EXTENSIONS = [
    "extra",
    "fenced_code",
    "codehilite",
    "toc",
    "sane_lists",
    "smarty",
    "pymdownx.arithmatex",
]

_EXTENSION_CONFIGS = {
    "codehilite": {"guess_lang": False, "noclasses": True},
    # generic=True wraps math in <span class="arithmatex"> / <div class="arithmatex">
    # for the front-end renderer (MathJax/KaTeX).
    "pymdownx.arithmatex": {
        "generic": True,
        "inline_syntax": ["dollar"],
        "block_syntax": ["dollar"],
    },
}


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts Markdown to HTML with optional LaTeX math support.

    ``to_html_body`` returns the bare fragment (used for export);
    ``to_html`` wraps it with the preview CSS and the math engine's scripts.
    """

    def __init__(self, math_engine: MathEngine = "mathjax") -> None:
        self.math_engine: MathEngine = math_engine

    def to_html_body(self, markdown_text: str) -> str:
        return markdown.markdown(
            markdown_text,
            extensions=_EXTENSIONS,
            extension_configs=_EXTENSION_CONFIGS,
            output_format="html",
        )

    def to_html(self, markdown_text: str) -> str:
        body = self.to_html_body(markdown_text)
        css, scripts = self._math_assets(self.math_engine)
        return HTML_TEMPLATE.format(css=CSS_PREVIEW + css, body=body + scripts)

    # -------------------- helpers --------------------

    def _math_assets(self, engine: MathEngine) -> tuple[str, str]:
        if engine == "katex":
            katex_css = (
                '<link rel="stylesheet" '
                'href="https://cdn.jsdelivr.net/npm/katex@0.16.10/dist/katex.min.css">'
            )
            katex_js = """
<script defer src="https://cdn.jsdelivr.net/npm/katex@0.16.10/dist/katex.min.js"></script>
<script defer src="https://cdn.jsdelivr.net/npm/katex@0.16.10/dist/contrib/auto-render.min.js"></script>
<script>
document.addEventListener("DOMContentLoaded", function() {
  if (typeof renderMathInElement === "function") {
    renderMathInElement(document.body, {
      delimiters: [
        {left: "$$", right: "$$", display: true},
        {left: "$",  right: "$",  display: false}
      ],
      ignoredTags: ["script", "noscript", "style", "textarea", "pre", "code"]
    });
  }
});
</script>
"""
            return katex_css, katex_js

        # MathJax v3
        mathjax_cfg = """
<script>
window.MathJax = {
  tex: {
    inlineMath: [['$', '$'], ['\\\\(', '\\\\)']],
    displayMath: [['$$', '$$'], ['\\\\[', '\\\\]']],
    processEscapes: true
  },
  options: {
    skipHtmlTags: ['script', 'noscript', 'style', 'textarea', 'pre', 'code']
  }
};
</script>
"""
        mathjax_js = (
            '<script id="MathJax-script" async '
            'src="https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-chtml.js"></script>'
        )
        return "", mathjax_cfg + mathjax_js
