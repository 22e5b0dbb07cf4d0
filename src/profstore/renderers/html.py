"""HTML fragment rendering for the run browser."""

from __future__ import annotations

from datetime import datetime
from html import escape
from urllib.parse import urlencode

from ..models import DirEntry, RunEntry, RunListing

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def render_listing_html(listing: RunListing, *, script_name: str = "") -> str:
    """Render existing sub-directories and runs as an HTML fragment.

    Run links point at ``script_name`` with ``run``, ``source`` and, when the
    listing is scoped, ``sub_dir`` query parameters. The surrounding page is
    the caller's concern. Modification times are shown in local time.
    """
    parts = ["<hr/>Existing dirs:\n<ul>\n"]
    parts.extend(_dir_item(entry) for entry in listing.directories)
    parts.append("</ul>\n")
    parts.append("<hr/>Existing runs:\n<ul>\n")
    parts.extend(_run_item(entry, script_name, listing.sub_dir) for entry in listing.runs)
    parts.append("</ul>\n")
    return "".join(parts)


def _dir_item(entry: DirEntry) -> str:
    href = "?" + urlencode({"sub_dir": entry.name})
    return _item(href, entry.name, _stamp(entry.modified))


def _run_item(entry: RunEntry, script_name: str, sub_dir: str | None) -> str:
    params = {"run": entry.run_id, "source": entry.run_type}
    if sub_dir:
        params["sub_dir"] = sub_dir
    href = f"{script_name}?{urlencode(params)}"
    return _item(href, entry.name, _stamp(entry.modified))


def _stamp(modified: datetime) -> str:
    return modified.astimezone().strftime(_TIME_FORMAT)


def _item(href: str, label: str, stamp: str) -> str:
    return f'<li><a href="{escape(href)}">{escape(label)}</a><small> {stamp}</small></li>\n'
