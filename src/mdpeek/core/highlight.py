"""Syntax highlighting for fenced code via Pygments"""

import logging
from typing import Callable, Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound


logger = logging.getLogger(__name__)

Highlighter = Callable[[str, str, Optional[dict]], str]

# markdown-it-py wraps the result in <pre><code class="language-...">, so no outer markup here.
_formatter = HtmlFormatter(nowrap=True)


def highlight_code(code: str, lang: str, attrs: Optional[dict] = None) -> str:
    """Return highlighted HTML spans for code, or '' when the language is unknown.

    An empty result tells markdown-it-py to fall back to the escaped source.
    """
    if not lang:
        return ''
    try:
        lexer = get_lexer_by_name(lang)
    except ClassNotFound:
        return ''
    return highlight(code, lexer, _formatter)


def safe_highlighter(highlighter: Highlighter) -> Highlighter:
    """Wrap a highlighter so any error degrades to "no highlighting" instead of propagating."""

    def _highlight(code: str, lang: str, attrs: Optional[dict] = None) -> str:
        try:
            return highlighter(code, lang, attrs)
        except Exception as e:
            logger.warning("Highlighting failed for language %r: %s", lang, e)
            return ''

    return _highlight
