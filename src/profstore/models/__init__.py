"""Data models."""

from .listing import DirEntry, RunEntry, RunListing

Run = dict[str, object]

__all__ = ["DirEntry", "Run", "RunEntry", "RunListing"]
