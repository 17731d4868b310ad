"""Diagram notation detection for fenced code blocks and render-scoped id assignment"""

import logging
import re
from typing import Optional

from mdpeek.core.models import DiagramMatch
from mdpeek.core.utils.hashing import hash_code


logger = logging.getLogger(__name__)

DIAGRAM_KEYWORDS = (
    'flowchart',
    'sequenceDiagram',
    'gantt',
    'classDiagram',
    'stateDiagram',
    'pie',
    'journey',
    'C4Context',
    'erDiagram',
    'requirementDiagram',
    'gitGraph',
)

# Keywords match as prefixes with no word boundary, so "piece = 1" reads as a pie chart.
DIAGRAM_RE = re.compile(
    r'^(?P<header>---[\s\S]+---)?\s*'
    r'(?P<definition>(?P<chart_type>' + '|'.join(DIAGRAM_KEYWORDS) + r')[\s\S]+)'
)


def classify_diagram(content: str) -> Optional[DiagramMatch]:
    """Return a DiagramMatch when content opens with a known diagram keyword, else None."""
    m = DIAGRAM_RE.match(content)
    if not m:
        return None
    logger.debug("Classified fence as %s diagram", m.group('chart_type'))
    return DiagramMatch(
        chart_type=m.group('chart_type'),
        definition=m.group('definition'),
        header=m.group('header'),
    )


class IdGenerator:
    """Hand out DOM-unique ids derived from a seed, for the lifetime of one render call.

    The first request for a seed returns the seed itself; repeats get a numeric
    suffix. Seeds are integers, so suffixed ids never clash with a bare seed.
    """

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def __call__(self, seed) -> str:
        key = str(seed)
        count = self._seen.get(key, 0)
        self._seen[key] = count + 1
        return key if count == 0 else f"{key}-{count}"


def new_render_env() -> dict:
    """Build the per-call render environment passed to markdown-it as env."""
    return {'gen_id': IdGenerator(), 'content_hash': hash_code}


def diagram_id(env: dict, definition: str) -> str:
    """Return the container id for a diagram definition within this render env."""
    return "graph-" + env['gen_id'](env['content_hash'](definition))
