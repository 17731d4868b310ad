"""Application configuration: settings schema and mdpeek.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "mdpeek.yaml"


class Settings(BaseModel):
    preset:      str  = Field(default="gfm-like", pattern="^(commonmark|default|zero|gfm-like|js-default)$",
                              description="MarkdownIt parser preset name")
    html:        bool = Field(default=True,  description="Allow raw HTML in the source")
    typographer: bool = Field(default=True,  description="Smart quotes and typographic replacements")
    linkify:     bool = Field(default=True,  description="Autolink bare URLs")
    syntax:      bool = Field(default=True,  description="Highlight fenced code with Pygments")
    math:        bool = Field(default=True,  description="Parse $...$, $$...$$ and ```math fences as math")
    footnotes:   bool = Field(default=True,  description="Parse footnotes")
    task_lists:  bool = Field(default=True,  description="Render [ ] / [x] list items as checkboxes")
    subscript:   bool = Field(default=True,  description="Render ~text~ as subscript")
    superscript: bool = Field(default=True,  description="Render ^text^ as superscript")
    emoji:       bool = Field(default=True,  description="Replace :name: and emoticon shortcuts with emoji")
    log_level:   str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                              description="Log level used by the CLI")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdpeek.yaml, then MDPEEK_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDPEEK_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
