"""Rich-based run listing rendering."""

from __future__ import annotations

from datetime import datetime
from io import StringIO

from rich.console import Console
from rich.table import Table

from ..models import RunListing

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def render_listing(listing: RunListing, *, title: str | None = None) -> str:
    console = Console(record=True, width=120, markup=False, file=StringIO())
    if listing.directories:
        console.print(_dirs_table(listing))
    console.print(_runs_table(listing, title))
    return console.export_text()


def _stamp(modified: datetime) -> str:
    return modified.astimezone().strftime(_TIME_FORMAT)


def _dirs_table(listing: RunListing) -> Table:
    table = Table(title="Existing dirs", title_justify="left")
    table.add_column("Directory")
    table.add_column("Modified")
    for entry in listing.directories:
        table.add_row(entry.name, _stamp(entry.modified))
    return table


def _runs_table(listing: RunListing, title: str | None) -> Table:
    table = Table(title=title or "Existing runs", title_justify="left")
    table.add_column("Run ID")
    table.add_column("Type")
    table.add_column("Modified")
    for entry in listing.runs:
        table.add_row(entry.run_id, entry.run_type, _stamp(entry.modified))
    if not listing.runs:
        table.caption = "no runs"
    return table
