"""Subcommand implementations."""

from __future__ import annotations

import sys
from pathlib import Path

from ..exceptions import ProfstoreError
from ..renderers import render_listing, render_listing_html
from ..serializers import load_run_json, run_to_json
from ..storage import FileRunStore


def run_list(
    directory: Path | None,
    sub_dir: str | None,
    *,
    as_html: bool,
    script_name: str,
) -> int:
    try:
        store = FileRunStore(directory, sub_dir=sub_dir)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    listing = store.list_runs()
    if as_html:
        print(render_listing_html(listing, script_name=script_name), end="")
    else:
        print(render_listing(listing, title=f"Existing runs in {store.directory}"), end="")
    return 0


def run_show(
    directory: Path | None,
    sub_dir: str | None,
    run_id: str,
    run_type: str,
    *,
    as_json: bool,
) -> int:
    try:
        store = FileRunStore(directory, sub_dir=sub_dir)
        run, description = store.get_run(run_id, run_type)
    except (ProfstoreError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if run is None:
        print(f"Error: {description}", file=sys.stderr)
        return 1

    if as_json:
        print(run_to_json(run, indent=2))
        return 0

    print(description)
    print(f"Run ID: {run_id}")
    print(f"Entries: {len(run)}")
    print(run_to_json(run, indent=2))
    return 0


def run_save(
    directory: Path | None,
    sub_dir: str | None,
    run_file: Path,
    run_type: str,
    run_id: str | None,
) -> int:
    try:
        run = load_run_json(run_file)
    except FileNotFoundError:
        print(f"Error: file not found: {run_file}", file=sys.stderr)
        return 1
    except ProfstoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1

    try:
        store = FileRunStore(directory, sub_dir=sub_dir)
        saved_id = store.save_run(run, run_type, run_id)
    except (ProfstoreError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(saved_id)
    return 0
