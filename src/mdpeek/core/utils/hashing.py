"""Non-cryptographic content hashing for render-scoped element ids"""


def hash_code(content: str) -> int:
    """Return an unsigned 32-bit polynomial hash of content (h = h * 31 + ord(c)).

    Deterministic and order-sensitive; only meant to seed DOM ids, not to detect tampering.
    """
    h = 0
    for ch in content:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    return h
