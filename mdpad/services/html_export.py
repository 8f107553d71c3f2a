from __future__ import annotations

import html

from mdpad.utils.constants import CSS_EXPORT, EXPORT_HTML_TEMPLATE


def build_html_document(title: str, body: str) -> str:
    """Wrap an already-rendered body in the standalone export page.

    The title is escaped; the body goes in untouched.
    """
    return EXPORT_HTML_TEMPLATE.format(title=html.escape(title), css=CSS_EXPORT, body=body)
