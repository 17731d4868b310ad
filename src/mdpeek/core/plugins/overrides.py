"""Render rule overrides for the preview: links, heading ids, math wrappers, math and diagram fences.

Each override changes one token type and hands the rest to the rule it replaces
(or to ``renderToken`` where markdown-it-py has no dedicated rule).
"""

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from mdpeek.core.diagram import classify_diagram, diagram_id
from mdpeek.core.utils.slug import heading_id
from mdpeek.core.utils.tokens import line_begin_attr


NO_NAVIGATION_HREF = 'javascript:return'
MATH_BLOCK_TYPES = ('math_block', 'math_block_label')
MATH_FENCE_INFO = 'math'


def render_link_open(self, tokens, idx, options, env) -> str:
    """Keep the host view from navigating; in-page anchors jump via onclick instead."""
    token = tokens[idx]
    href = token.attrGet('href')
    if href and str(href).startswith('#'):
        token.attrSet('onclick', f"location.hash='{href}'")
    token.attrSet('href', NO_NAVIGATION_HREF)
    return self.renderToken(tokens, idx, options, env)


def render_heading_open(self, tokens, idx, options, env) -> str:
    tokens[idx].attrSet('id', heading_id(tokens[idx + 1].content))
    return self.renderToken(tokens, idx, options, env)


def _wrap_line_begin(default_rule):
    """Wrap a block rule's output in a div carrying the token's line-begin attribute."""

    def _rule(self, tokens, idx, options, env) -> str:
        inner = default_rule(tokens, idx, options, env)
        return f'<div{line_begin_attr(tokens[idx])}>\n{inner}</div>\n'

    return _rule


def _fence(default_fence, math_block=None):
    """Render ```math fences as math blocks and diagram notation as a placeholder
    for the browser-side renderer; anything else goes to the default fence rule.
    """

    def _rule(self, tokens, idx, options, env) -> str:
        token = tokens[idx]
        if math_block is not None and token.info.strip() == MATH_FENCE_INFO:
            return f'<div{line_begin_attr(token)}>\n{math_block(tokens, idx, options, env)}</div>\n'

        diagram = classify_diagram(token.content.strip())
        if diagram is None:
            return default_fence(tokens, idx, options, env)

        return (
            f'<div class="peek-mermaid-container"{line_begin_attr(token)}>\n'
            f'<div id="{diagram_id(env, diagram.definition)}" data-graph="mermaid"'
            f' data-graph-definition="{escapeHtml(diagram.definition)}">\n'
            '<div class="peek-loader"></div>\n'
            '</div>\n'
            '</div>\n'
        )

    return _rule


def overrides_plugin(md: MarkdownIt) -> None:
    """Install the preview render overrides; call after any plugin that defines math rules."""
    md.add_render_rule('link_open', render_link_open)
    md.add_render_rule('heading_open', render_heading_open)
    md.add_render_rule('fence', _fence(md.renderer.rules['fence'], md.renderer.rules.get('math_block')))

    for name in MATH_BLOCK_TYPES:
        if name in md.renderer.rules:
            md.add_render_rule(name, _wrap_line_begin(md.renderer.rules[name]))
