"""Front matter block rule: a fenced metadata block at the very start of a document.

The block opens with a run of at least three marker characters on line 0 and
closes on the first later line carrying a run at least as long, or on a
``...`` line. An unterminated block is closed at the end of its container.
The token is hidden; the metadata text travels on the token, in
``env["front_matter"]`` and, optionally, through a callback.
"""

import logging
from typing import Callable, Optional

from markdown_it import MarkdownIt
from markdown_it.rules_block import StateBlock

from mdpeek.core.models import FrontMatterMatch


logger = logging.getLogger(__name__)

MARKER = '-'
MIN_MARKERS = 3
ALT_TERMINATOR = '...'

# Contexts that may try this rule while checking for a block terminator.
FRONT_MATTER_ALT = ['paragraph', 'reference', 'blockquote', 'list']

MetaCallback = Callable[[str], None]


def _marker_run(src: str, start: int, maximum: int) -> int:
    """Count characters from start that continue the repeated MARKER string."""
    pos = start
    while pos < maximum and src[pos] == MARKER[(pos - start) % len(MARKER)]:
        pos += 1
    return pos - start


def _opening_markers(state: StateBlock, start_line: int) -> int:
    """Return the marker count of a valid opening fence, or 0."""
    if start_line != 0 or not state.src.startswith(MARKER[0]):
        return 0
    start = state.bMarks[start_line] + state.tShift[start_line]
    count = _marker_run(state.src, start, state.eMarks[start_line]) // len(MARKER)
    return count if count >= MIN_MARKERS else 0


def _is_closing_fence(state: StateBlock, line: int, marker_count: int) -> bool:
    start = state.bMarks[line] + state.tShift[line]
    maximum = state.eMarks[line]

    if state.src[start:start + 1] != MARKER[0]:
        return False
    # closing fence must be indented less than 4 spaces
    if state.sCount[line] - state.blkIndent >= 4:
        return False

    run = _marker_run(state.src, start, maximum)
    if run // len(MARKER) < marker_count:
        return False

    # only spaces may follow the markers
    pos = state.skipSpaces(start + run - run % len(MARKER))
    return pos >= maximum


def _scan(state: StateBlock, start_line: int, end_line: int, marker_count: int) -> FrontMatterMatch:
    """Find where the block ends; never fails once the opening fence is valid."""
    src = state.src
    next_line = start_line
    closed = False
    meta_end = None

    while True:
        next_line += 1
        if next_line >= end_line:
            # unterminated: closed by the end of the document or parent container
            break

        start = state.bMarks[next_line] + state.tShift[next_line]
        maximum = state.eMarks[next_line]

        if start < maximum and state.sCount[next_line] < state.blkIndent:
            # non-empty line with negative indent ends the parent block
            meta_end = state.bMarks[next_line] - 1
            break

        if src[start:maximum].strip() == ALT_TERMINATOR:
            meta_end = state.bMarks[next_line] - 1
            next_line += 1
            break

        if _is_closing_fence(state, next_line, marker_count):
            meta_end = state.bMarks[next_line] - 1
            closed = True
            break

    if meta_end is None:
        meta_end = state.eMarks[end_line - 1]

    stop = next_line + (1 if closed else 0)
    content_start = state.eMarks[start_line] + 1
    return FrontMatterMatch(
        start_line=start_line,
        end_line=stop,
        meta=src[content_start:meta_end] if content_start < meta_end else '',
        markup=src[state.bMarks[start_line]:state.eMarks[stop - 1]],
        closed=closed,
    )


def make_front_matter_rule(callback: Optional[MetaCallback] = None):
    """Build the block rule; callback receives the metadata text once per real match."""

    def front_matter_rule(state: StateBlock, start_line: int, end_line: int, silent: bool) -> bool:
        marker_count = _opening_markers(state, start_line)
        if not marker_count:
            return False

        # the opening fence alone decides feasibility
        if silent:
            return True

        match = _scan(state, start_line, end_line, marker_count)
        logger.debug(
            "Front matter on lines %d-%d (%s)",
            match.start_line, match.end_line, "closed" if match.closed else "auto-closed",
        )

        old_parent = state.parentType
        old_line_max = state.lineMax
        state.parentType = 'container'
        # keeps lazy continuations from running past the end marker
        state.lineMax = match.end_line - (1 if match.closed else 0)

        token = state.push('front_matter', '', 0)
        token.hidden = True
        token.block = True
        token.content = match.meta
        token.markup = match.markup
        token.map = [match.start_line, match.end_line]
        token.meta = {'closed': match.closed}

        state.parentType = old_parent
        state.lineMax = old_line_max
        state.line = match.end_line

        state.env['front_matter'] = match
        if callback is not None:
            callback(match.meta)
        return True

    return front_matter_rule


def front_matter_plugin(md: MarkdownIt, callback: Optional[MetaCallback] = None) -> None:
    """Register the front matter rule ahead of tables, claimable from the FRONT_MATTER_ALT contexts."""
    md.block.ruler.before(
        'table',
        'front_matter',
        make_front_matter_rule(callback),
        {'alt': FRONT_MATTER_ALT},
    )
