"""Render pipeline: parse, tag top-level blocks with source lines, render HTML"""

from functools import lru_cache
from typing import Optional

from markdown_it import MarkdownIt

from mdpeek.core.diagram import new_render_env
from mdpeek.core.models import RenderedDocument
from mdpeek.core.parse import front_matter_of, make_parser, parse_metadata, parse_tokens
from mdpeek.core.utils.tokens import LINE_BEGIN_ATTR


@lru_cache(maxsize=1)
def default_parser() -> MarkdownIt:
    """Shared parser with default Settings."""
    return make_parser()


def tag_line_begin(tokens: list) -> list:
    """Stamp each top-level block token that has a source map with its 1-based start line."""
    for token in tokens:
        if token.map and token.level == 0:
            token.attrSet(LINE_BEGIN_ATTR, str(token.map[0] + 1))
    return tokens


def _render_tokens(md: MarkdownIt, tokens: list) -> str:
    # fresh env per call: diagram ids are only unique within one render
    return md.renderer.render(tokens, md.options, new_render_env())


def render(markdown: str, md: Optional[MarkdownIt] = None) -> str:
    """Render markdown to preview HTML."""
    md = md or default_parser()
    tokens, _ = parse_tokens(md, markdown)
    return _render_tokens(md, tag_line_begin(tokens))


def render_document(markdown: str, md: Optional[MarkdownIt] = None) -> RenderedDocument:
    """Render markdown and return the HTML together with its front matter text and parsed metadata."""
    md = md or default_parser()
    tokens, env = parse_tokens(md, markdown)
    html = _render_tokens(md, tag_line_begin(tokens))

    match = front_matter_of(env)
    if match is None:
        return RenderedDocument(html=html)
    return RenderedDocument(html=html, front_matter=match.meta, metadata=parse_metadata(match.meta))
