"""Storage backends."""

from .base import RunStore
from .file import FileRunStore
from .memory import MemoryRunStore

__all__ = ["FileRunStore", "MemoryRunStore", "RunStore"]
