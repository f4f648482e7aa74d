"""Small string helpers."""

from __future__ import annotations


def truncate_str(s: str, max_len: int) -> str:
    """Truncate ``s`` to at most ``max_len`` UTF-8 bytes.

    Never splits a multi-byte character: the cut moves back to the previous
    character boundary instead.

    Example:
        >>> truncate_str("hello world", 5)
        'hello'
        >>> truncate_str("héllo", 2)
        'h'
    """
    encoded = s.encode("utf-8")
    if len(encoded) <= max_len:
        return s
    return encoded[: max(max_len, 0)].decode("utf-8", errors="ignore")
