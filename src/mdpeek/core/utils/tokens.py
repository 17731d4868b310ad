"""Shared markdown-it token utilities"""

LINE_BEGIN_ATTR = 'data-line-begin'


def line_begin(token) -> str | None:
    """Return the 1-based source line stamped on a token, or None if untagged."""
    return token.attrGet(LINE_BEGIN_ATTR)


def line_begin_attr(token) -> str:
    """Render the line-begin attribute (with a leading space) for hand-built HTML, or ''."""
    value = line_begin(token)
    return f' {LINE_BEGIN_ATTR}="{value}"' if value is not None else ''
