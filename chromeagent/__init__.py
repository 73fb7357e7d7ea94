"""Character-safe string truncation helper."""

__version__ = "0.4.2"
__all__ = ["truncate"]