"""File-based run storage backend."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from uuid import uuid4

from ..core import StoreConfig
from ..exceptions import RunWriteError
from ..models import DirEntry, Run, RunEntry, RunListing
from ..serializers import load_run_json, run_to_json
from .base import check_name, describe_missing, describe_run, split_types

logger = logging.getLogger(__name__)


class FileRunStore:
    """Writes each run to ``{run_id}.{type}.{suffix}`` in a directory.

    The directory is resolved once at construction: an explicit ``directory``
    wins, then ``config.output_dir``, then ``PROFSTORE_OUTPUT_DIR``, then the
    system temp directory (with a logged warning). A non-empty ``sub_dir`` is appended to the result.
    """

    def __init__(
        self,
        directory: str | Path | None = None,
        *,
        config: StoreConfig | None = None,
        sub_dir: str | None = None,
    ) -> None:
        self.config = config if config is not None else StoreConfig.from_env()
        self.suffix = self.config.suffix
        self.sub_dir = sub_dir or None
        self.directory = self._resolve_directory(directory)
        if not self.directory.is_dir():
            try:
                self.directory.mkdir()
            except OSError as exc:
                logger.error("Could not create run directory %s: %s", self.directory, exc)

    def _resolve_directory(self, directory: str | Path | None) -> Path:
        if directory:
            base = Path(directory)
        elif self.config.output_dir is not None:
            base = self.config.output_dir
        elif (env_dir := StoreConfig.from_env().output_dir) is not None:
            base = env_dir
        else:
            base = self.config.fallback_dir
            logger.warning(
                "Must specify directory location for profiler runs. Trying %s as default. "
                "You can either pass the directory location to FileRunStore() "
                "or set the PROFSTORE_OUTPUT_DIR environment variable.",
                base,
            )
        if self.sub_dir is not None:
            check_name(self.sub_dir, "sub directory")
            base = base / self.sub_dir
        return base

    def gen_run_id(self, run_type: str) -> str:
        return uuid4().hex

    def file_name(self, run_id: str, run_type: str, *, for_save: bool = False) -> Path | None:
        """Resolve the file for a run.

        In save mode the path for the first listed type is returned without
        an existence check. Otherwise the first existing candidate wins and
        ``None`` means no candidate exists.
        """
        for path in self._candidates(run_id, run_type):
            if for_save or path.is_file():
                return path
        return None

    def _candidates(self, run_id: str, run_type: str) -> Iterator[Path]:
        check_name(run_id, "run id")
        for current_type in split_types(run_type):
            check_name(current_type, "run type")
            yield self.directory / f"{run_id}.{current_type}.{self.suffix}"

    def get_run(self, run_id: str, run_type: str) -> tuple[Run | None, str]:
        try:
            path = self.file_name(run_id, run_type)
        except ValueError as exc:
            logger.error("Invalid run lookup %s of type %s: %s", run_id, run_type, exc)
            return None, describe_missing(run_id)
        if path is None:
            logger.error("Could not find run %s of type %s in %s", run_id, run_type, self.directory)
            return None, describe_missing(run_id)

        run = load_run_json(path)
        logger.debug("Loaded run %s from %s", run_id, path)
        return run, describe_run(self.suffix, run_type)

    def save_run(self, run: Run, run_type: str, run_id: str | None = None) -> str:
        payload = run_to_json(run)
        if run_id is None:
            run_id = self.gen_run_id(run_type)

        path = next(self._candidates(run_id, run_type))
        try:
            with path.open("w", encoding="utf-8") as handle:
                handle.write(payload)
        except OSError as exc:
            logger.error("Could not open %s: %s", path, exc)
            raise RunWriteError(f"Could not write run {run_id} to {path}: {exc}") from exc

        logger.debug("Saved run in %s", path)
        return run_id

    def list_runs(self) -> RunListing:
        listing = RunListing(sub_dir=self.sub_dir)
        if not self.directory.is_dir():
            return listing

        dirs = [DirEntry.from_path(path) for path in self.directory.iterdir() if path.is_dir()]
        runs = [
            entry
            for path in self.directory.glob(f"*.{self.suffix}")
            if path.is_file() and (entry := RunEntry.from_path(path, self.suffix)) is not None
        ]
        listing.directories = sorted(dirs, key=lambda entry: entry.modified, reverse=True)
        listing.runs = sorted(runs, key=lambda entry: entry.modified, reverse=True)
        return listing
