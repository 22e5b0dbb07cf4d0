from __future__ import annotations

import pytest

from profstore.core.store_config import OUTPUT_DIR_ENV, SUFFIX_ENV


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient configuration out of the tests."""
    monkeypatch.delenv(OUTPUT_DIR_ENV, raising=False)
    monkeypatch.delenv(SUFFIX_ENV, raising=False)
