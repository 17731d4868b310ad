"""Shared fixtures for core unit tests"""

import pytest

from mdpeek.config import Settings
from mdpeek.core.parse import make_parser


SAMPLE_MD = """\
---
title: Sample
tags: [a, b]
---
# Heading 1

A paragraph with **bold** text and a [link](#heading-2).

## Heading 2

- item one
- item two

```python
print("hello")
```

```mermaid
flowchart TD
A-->B
```

$$
x^2
$$
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser(Settings(syntax=False))


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(parser):
    return parser.parse(SAMPLE_MD)


@pytest.fixture(name="sample_lines")
def sample_lines_fixture():
    return SAMPLE_MD.splitlines(keepends=True)


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
