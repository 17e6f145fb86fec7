"""Syntax highlighting of code blocks into inline-styled HTML."""

from __future__ import annotations

import logging

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .errors import OrandaError
from .themes import SyntaxTheme

logger = logging.getLogger("oranda")

_LANGUAGE_ALIASES = {"text": "txt", "shell": "sh"}

# Syntax themes that ship with oranda, mapped to the pygments style implementing them.
_THEME_STYLES = {SyntaxTheme.MaterialTheme: "material"}
_FALLBACK_STYLE = "default"


def resolve_language(lang: str | None) -> str:
    """Map a code fence annotation to the name used to look up a lexer."""
    if lang is None:
        return ""
    return _LANGUAGE_ALIASES.get(lang, lang)


def _find_lexer(language: str) -> Lexer:
    # Try the annotation as a file extension first ("rs"), then as a name ("rust").
    if language:
        try:
            return get_lexer_for_filename(f"snippet.{language}")
        except ClassNotFound:
            pass
        try:
            return get_lexer_by_name(language)
        except ClassNotFound:
            pass
        logger.warning(
            "Found syntax highlight language annotation `%s` which is not currently "
            "supported. The annotated block will be shown as plaintext.",
            language,
        )
    return TextLexer()


def _style_for(syntax_theme: SyntaxTheme):
    try:
        style_name = _THEME_STYLES[syntax_theme]
    except KeyError:
        raise OrandaError(f"Syntax theme {syntax_theme} is not available.") from None
    try:
        return get_style_by_name(style_name)
    except ClassNotFound:
        return get_style_by_name(_FALLBACK_STYLE)


def syntax_highlight(
    lang: str | None,
    code: str,
    syntax_theme: SyntaxTheme = SyntaxTheme.MaterialTheme,
) -> str:
    """Highlight ``code`` as a ``<pre>`` block with inline styles."""
    style = _style_for(syntax_theme)
    lexer = _find_lexer(resolve_language(lang))
    formatter = HtmlFormatter(style=style, noclasses=True, nowrap=True)
    body = highlight(code, lexer, formatter)
    background = style.background_color or "#ffffff"
    return f'<pre style="background-color:{background};">\n{body}</pre>\n'