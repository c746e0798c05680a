"""Render page Markdown into HTML with syntax-highlighted code samples."""

from __future__ import annotations

import re
from html import escape, unescape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
CODE_ELEMENT_PATTERN = re.compile(
    r'<pre><code(?: class="language-([^"\s]+)")?>(.*?)</code></pre>', re.DOTALL
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
MARKDOWN_EXTENSIONS = ("fenced_code", "tables", "sane_lists", "toc")


class HtmlContentRenderer:
    """Render page bodies with consistent code highlighting."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer for the given Pygments style.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML, highlighting every code block.

        Fenced blocks (backtick or tilde) keep their declared language; indented
        blocks and unlabeled fences are tagged ``text``.
        """
        normalized = FENCED_INDENT_PATTERN.sub(r"\1", text)
        if not normalized.strip():
            return ""
        md = Markdown(extensions=list(MARKDOWN_EXTENSIONS))
        html = md.convert(normalized)

        def _repl(match: re.Match[str]) -> str:
            return self.code_block(unescape(match.group(2)), match.group(1))

        return CODE_ELEMENT_PATTERN.sub(_repl, html)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML with a ``data-language`` tag.

        Unknown lexer names fall back to plain text highlighting while keeping
        the declared language in the attribute.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        html = highlight(code, lexer, self._formatter)
        safe_lang = escape(lang, quote=True)
        tag = f'<div class="codehilite" data-language="{safe_lang}">'
        return CODEHILITE_OPEN_TAG.sub(lambda _match: tag, html, 1)


__all__ = ["HtmlContentRenderer"]
