"""Core configuration primitives."""

from .store_config import DEFAULT_SUFFIX, StoreConfig

__all__ = ["DEFAULT_SUFFIX", "StoreConfig"]
