"""Intermediate data models for the parse and render pipeline"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel


@dataclass(frozen=True)
class FrontMatterMatch:
    """Result of the front-matter block rule for one document."""
    start_line: int
    end_line:   int            # exclusive; equals the container end when unterminated
    meta:       str            # raw text strictly between the fences
    markup:     str            # consumed raw span, opening fence onward
    closed:     bool           # True only when an explicit closing fence was found


@dataclass(frozen=True)
class DiagramMatch:
    """A fenced code block recognised as diagram notation."""
    chart_type: str
    definition: str            # notation body, without the optional header
    header:     Optional[str] = None


class RenderedDocument(BaseModel):
    """Public render result: HTML plus the front matter pulled out during parsing."""
    html: str
    front_matter: Optional[str] = None      # raw metadata text; None when absent
    metadata: dict[str, Any] = {}
