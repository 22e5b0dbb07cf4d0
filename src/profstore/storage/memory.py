"""In-memory run storage backend."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from uuid import uuid4

from ..models import Run, RunEntry, RunListing
from ..serializers import run_from_json, run_to_json
from .base import check_name, describe_missing, describe_run, split_types

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = "memory"


class MemoryRunStore:
    """In-memory store. Good for tests and short-lived scripts.

    Runs are kept serialized, so every ``get_run`` returns an independent copy.
    """

    def __init__(self, suffix: str = DEFAULT_SUFFIX) -> None:
        self.suffix = suffix
        self._runs: dict[tuple[str, str], tuple[str, datetime]] = {}

    def get_run(self, run_id: str, run_type: str) -> tuple[Run | None, str]:
        try:
            check_name(run_id, "run id")
            for current_type in split_types(run_type):
                check_name(current_type, "run type")
                stored = self._runs.get((run_id, current_type))
                if stored is not None:
                    return run_from_json(stored[0]), describe_run(self.suffix, run_type)
        except ValueError as exc:
            logger.error("Invalid run lookup %s of type %s: %s", run_id, run_type, exc)
            return None, describe_missing(run_id)

        logger.error("Could not find run %s of type %s in memory", run_id, run_type)
        return None, describe_missing(run_id)

    def save_run(self, run: Run, run_type: str, run_id: str | None = None) -> str:
        payload = run_to_json(run)
        if run_id is None:
            run_id = uuid4().hex
        check_name(run_id, "run id")
        first_type = split_types(run_type)[0]
        check_name(first_type, "run type")
        self._runs[(run_id, first_type)] = (payload, datetime.now(UTC))
        return run_id

    def list_runs(self) -> RunListing:
        runs = [
            RunEntry(
                run_id=run_id,
                run_type=run_type,
                name=f"{run_id}.{run_type}.{self.suffix}",
                modified=saved_at,
            )
            for (run_id, run_type), (_, saved_at) in self._runs.items()
        ]
        runs.sort(key=lambda entry: entry.modified, reverse=True)
        return RunListing(runs=runs)
