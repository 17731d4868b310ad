"""MarkdownIt construction, tokenization, and front matter metadata parsing"""

import logging
from typing import Any, Optional

import yaml
from markdown_it import MarkdownIt
from mdit_py_emoji import emoji_plugin
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.subscript import sub_plugin
from mdit_py_plugins.superscript import superscript_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from mdpeek.config import Settings
from mdpeek.core.highlight import highlight_code, safe_highlighter
from mdpeek.core.models import FrontMatterMatch
from mdpeek.core.plugins.front_matter import MetaCallback, front_matter_plugin
from mdpeek.core.plugins.overrides import overrides_plugin


logger = logging.getLogger(__name__)


def make_parser(settings: Optional[Settings] = None, metadata_callback: Optional[MetaCallback] = None) -> MarkdownIt:
    """Build a MarkdownIt instance with the preview plugins and render overrides installed.

    Built once and shared; nothing here is mutated while rendering.
    """
    settings = settings or Settings()
    options: dict[str, Any] = {
        "html": settings.html,
        "typographer": settings.typographer,
        "linkify": settings.linkify,
        "langPrefix": "language-",
    }
    if settings.syntax:
        options["highlight"] = safe_highlighter(highlight_code)

    md = MarkdownIt(settings.preset, options_update=options)
    if settings.typographer:
        md.enable(["replacements", "smartquotes"])
    if settings.linkify:
        md.enable("linkify")

    if settings.footnotes:
        md.use(footnote_plugin)
    if settings.task_lists:
        md.use(tasklists_plugin, enabled=False, label=True)
    if settings.math:
        md.use(dollarmath_plugin)
    if settings.subscript:
        md.use(sub_plugin)
    if settings.superscript:
        md.use(superscript_plugin)
    if settings.emoji:
        md.use(emoji_plugin)

    md.use(front_matter_plugin, callback=metadata_callback)
    # last, so the math rules it wraps already exist
    md.use(overrides_plugin)
    return md


def parse_tokens(md: MarkdownIt, markdown: str) -> tuple[list, dict]:
    """Tokenize markdown; returns (tokens, env). env holds the FrontMatterMatch, if any."""
    if not isinstance(markdown, str):
        raise TypeError(f"markdown must be str, got {type(markdown).__name__}")
    env: dict = {}
    tokens = md.parse(markdown, env)
    return tokens, env


def front_matter_of(env: dict) -> Optional[FrontMatterMatch]:
    return env.get("front_matter")


def parse_metadata(meta: str) -> dict[str, Any]:
    """Return front matter text as a mapping; unparseable or non-mapping YAML yields {}."""
    if not meta.strip():
        return {}
    try:
        data = yaml.safe_load(meta)
    except yaml.YAMLError as e:
        logger.warning("Ignoring invalid YAML front matter: %s", e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring front matter: expected a mapping, got %s", type(data).__name__)
        return {}
    return data
