"""Configuration for a run store."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from pydantic import BaseModel, Field

OUTPUT_DIR_ENV = "PROFSTORE_OUTPUT_DIR"
SUFFIX_ENV = "PROFSTORE_SUFFIX"
DEFAULT_SUFFIX = "profstore"


class StoreConfig(BaseModel):
    """Validated configuration for a FileRunStore. Passed via DI at construction."""

    output_dir: Path | None = None
    suffix: str = Field(default=DEFAULT_SUFFIX, min_length=1, pattern=r"^[^./\\]+$")
    fallback_dir: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()))

    @classmethod
    def from_env(cls) -> StoreConfig:
        """Build a config from ``PROFSTORE_OUTPUT_DIR`` and ``PROFSTORE_SUFFIX``."""
        output_dir = os.environ.get(OUTPUT_DIR_ENV) or None
        suffix = os.environ.get(SUFFIX_ENV) or DEFAULT_SUFFIX
        return cls(output_dir=output_dir, suffix=suffix)
