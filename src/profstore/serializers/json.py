"""JSON serialization helpers for run payloads."""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..exceptions import RunLoadError
from ..models import Run

_RUN_ADAPTER: TypeAdapter[Run] = TypeAdapter(Run)


def run_to_json(run: Run, *, indent: int | None = None) -> str:
    return _RUN_ADAPTER.dump_json(run, indent=indent).decode("utf-8")


def run_from_json(payload: str | bytes) -> Run:
    """Parse a JSON document into a run.

    Raises ``RunLoadError`` when the payload is not valid UTF-8 JSON or is not
    a JSON object.
    """
    try:
        return _RUN_ADAPTER.validate_json(payload)
    except ValidationError as exc:
        raise RunLoadError(f"Failed to parse run JSON: {exc}") from exc


def save_run_json(run: Run, path: str | Path, *, indent: int | None = None) -> Path:
    output_path = Path(path)
    output_path.write_text(run_to_json(run, indent=indent), encoding="utf-8")
    return output_path


def load_run_json(path: str | Path) -> Run:
    """Load a run from a JSON file.

    Raises ``RunLoadError`` on invalid content,
    or ``FileNotFoundError`` / ``OSError`` if the file is inaccessible.
    """
    payload = Path(path).read_bytes()
    return run_from_json(payload)
