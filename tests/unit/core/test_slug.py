"""Unit tests for core/utils/slug.py"""

import pytest

from mdpeek.core.utils.slug import heading_id


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("hello   world!!", "hello-world"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("Special! Ch@rs#", "special-chrs"),
    ("already-slugified", "already-slugified"),
    ("Version 2.0 Notes", "version-20-notes"),
    ("snake_case_name", "snakecasename"),
    ("", ""),
])
def test_heading_id_basic(text, expected):
    """heading_id joins words with hyphens and keeps only [a-z0-9-]."""
    assert heading_id(text) == expected


def test_heading_id_drops_non_ascii():
    """Non-ASCII letters are stripped rather than transliterated."""
    assert heading_id("Café Olé") == "caf-ol"


def test_heading_id_splits_on_spaces_only():
    """Tabs are not word separators; they are dropped like any other character."""
    assert heading_id("a\tb") == "ab"
