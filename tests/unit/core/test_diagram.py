"""Unit tests for core/diagram.py"""

import pytest

from mdpeek.core.diagram import (
    DIAGRAM_KEYWORDS,
    IdGenerator,
    classify_diagram,
    diagram_id,
    new_render_env,
)
from mdpeek.core.utils.hashing import hash_code


def test_classify_flowchart():
    """A plain flowchart definition is recognised with its chart type."""
    match = classify_diagram("flowchart TD\nA-->B")
    assert match is not None
    assert match.chart_type == "flowchart"
    assert match.definition == "flowchart TD\nA-->B"
    assert match.header is None


def test_classify_code_is_not_diagram():
    assert classify_diagram('print("hi")') is None


@pytest.mark.parametrize("keyword", DIAGRAM_KEYWORDS)
def test_classify_every_keyword(keyword):
    """Each known keyword opens a diagram."""
    match = classify_diagram(f"{keyword}\n  body")
    assert match is not None
    assert match.chart_type == keyword


def test_classify_keyword_alone_is_not_diagram():
    """The keyword must be followed by at least one more character."""
    assert classify_diagram("gantt") is None


def test_classify_keyword_must_lead():
    """Keywords later in the content do not count."""
    assert classify_diagram("# notes\nflowchart TD\nA-->B") is None


def test_classify_with_header():
    """An embedded --- header is split off the definition."""
    content = "---\ntitle: Example\n---\nsequenceDiagram\nAlice->>Bob: Hi"
    match = classify_diagram(content)
    assert match is not None
    assert match.header == "---\ntitle: Example\n---"
    assert match.definition == "sequenceDiagram\nAlice->>Bob: Hi"


def test_id_generator_first_use_is_seed():
    gen = IdGenerator()
    assert gen(42) == "42"


def test_id_generator_repeats_get_suffix():
    """The same seed twice yields distinct ids derived from the seed."""
    gen = IdGenerator()
    assert [gen(7), gen(7), gen(7)] == ["7", "7-1", "7-2"]


def test_id_generator_seeds_independent():
    gen = IdGenerator()
    assert gen(1) == "1"
    assert gen(2) == "2"
    assert gen(1) == "1-1"


def test_new_render_env_is_fresh():
    """Each env has its own generator, so ids restart per render."""
    first, second = new_render_env(), new_render_env()
    assert first["gen_id"] is not second["gen_id"]
    assert diagram_id(first, "pie x") == diagram_id(second, "pie x")


def test_diagram_id_hashes_definition():
    env = new_render_env()
    assert diagram_id(env, "pie x") == f"graph-{hash_code('pie x')}"
    assert diagram_id(env, "pie x") == f"graph-{hash_code('pie x')}-1"


def test_classify_keyword_prefix_matches():
    """Keywords match as prefixes, so code starting with 'piece' reads as a pie chart."""
    match = classify_diagram("piece = 1")
    assert match is not None
    assert match.chart_type == "pie"
    assert match.definition == "piece = 1"
