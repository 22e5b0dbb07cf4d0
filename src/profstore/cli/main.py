"""Command line interface for profstore."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .commands import run_list, run_save, run_show


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="profstore")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List stored runs")
    _add_store_arguments(list_parser)
    list_parser.add_argument(
        "--html",
        action="store_true",
        help="Emit the HTML fragment used by the run browser",
    )
    list_parser.add_argument(
        "--script-name",
        default="",
        help="Link target for runs in --html output",
    )

    show_parser = subparsers.add_parser("show", help="Show a stored run")
    show_parser.add_argument("run_id", help="Run identifier")
    show_parser.add_argument(
        "--type",
        dest="run_type",
        required=True,
        help="Run type, or a comma-separated list tried in order",
    )
    _add_store_arguments(show_parser)
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit only the run payload as JSON",
    )

    save_parser = subparsers.add_parser("save", help="Save a JSON file as a run")
    save_parser.add_argument("run_file", type=Path, help="Path to a JSON object to store")
    save_parser.add_argument("--type", dest="run_type", required=True, help="Run type")
    save_parser.add_argument("--run-id", default=None, help="Run identifier (generated if omitted)")
    _add_store_arguments(save_parser)
    return parser


def _add_store_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dir",
        dest="directory",
        type=Path,
        default=None,
        help="Run directory (defaults to $PROFSTORE_OUTPUT_DIR)",
    )
    parser.add_argument("--sub-dir", default=None, help="Sub-directory of the run directory")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "list":
        return run_list(
            args.directory,
            args.sub_dir,
            as_html=args.html,
            script_name=args.script_name,
        )
    if args.command == "show":
        return run_show(args.directory, args.sub_dir, args.run_id, args.run_type, as_json=args.json)
    if args.command == "save":
        return run_save(args.directory, args.sub_dir, args.run_file, args.run_type, args.run_id)

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
