"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_EXPORT,
    CSS_PREVIEW,
    EXPORT_HTML_TEMPLATE,
    HTML_TEMPLATE,
    MAX_RECENTS,
    SETTINGS_GEOMETRY,
    SETTINGS_RECENTS,
    SETTINGS_SPLITTER,
    UNTITLED,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_EXPORT",
    "CSS_PREVIEW",
    "EXPORT_HTML_TEMPLATE",
    "HTML_TEMPLATE",
    "SETTINGS_GEOMETRY",
    "SETTINGS_SPLITTER",
    "SETTINGS_RECENTS",
    "MAX_RECENTS",
    "UNTITLED",
]
