"""Unit tests for core/utils/tokens.py"""

from markdown_it.token import Token

from mdpeek.core.utils.tokens import LINE_BEGIN_ATTR, line_begin, line_begin_attr


def test_line_begin_returns_stamped_value():
    token = Token("paragraph_open", "p", 1)
    token.attrSet(LINE_BEGIN_ATTR, "7")
    assert line_begin(token) == "7"
    assert line_begin_attr(token) == ' data-line-begin="7"'


def test_untagged_token_has_no_attribute():
    """Nested blocks carry no line tag, so nothing is rendered for them."""
    token = Token("math_block", "math", 0)
    assert line_begin(token) is None
    assert line_begin_attr(token) == ""
