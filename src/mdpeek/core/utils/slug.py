"""Heading id derivation for in-page anchors"""

import re


_INVALID_ID_CHARS = re.compile(r'[^a-z0-9-]', re.IGNORECASE | re.ASCII)


def heading_id(text: str) -> str:
    """Convert heading text to an anchor id: words joined by hyphens, [a-z0-9-] only, lowercase.

    Identical headings yield identical ids; duplicates are left as-is.
    """
    words = [w for w in text.strip().split(' ') if w]
    return _INVALID_ID_CHARS.sub('', '-'.join(words)).lower()
