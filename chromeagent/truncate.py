"""Character-safe string truncation."""

from __future__ import annotations


def truncate_str(s: str, max_chars: int, suffix: str) -> str:
    """Return ``s`` cut to at most ``max_chars`` characters, with ``suffix`` appended if cut."""
    if max_chars < 0:
        raise ValueError("max_chars must be non-negative")
    if len(s) <= max_chars:
        return s
    return f"{s[:max_chars]}{suffix}"