"""Pygments wrapper for fenced code blocks"""

import logging

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound


logger = logging.getLogger(__name__)

FALLBACK_THEME = "default"


def resolve_theme(name: str) -> str:
    """Return name if Pygments knows the style, else the fallback style."""
    try:
        get_style_by_name(name)
    except ClassNotFound:
        logger.warning("Unknown code theme %r, using %r", name, FALLBACK_THEME)
        return FALLBACK_THEME
    return name


def highlight_code(code: str, language: str, theme: str) -> str:
    """Render code as inline-styled HTML; unknown languages fall back to plain text."""
    try:
        lexer = get_lexer_by_name(language)
    except ClassNotFound:
        lexer = TextLexer()
    formatter = HtmlFormatter(style=theme, noclasses=True, wrapcode=True, cssclass="code-block")
    return highlight(code, lexer, formatter)
