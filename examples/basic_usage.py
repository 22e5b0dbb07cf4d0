"""Basic usage example using the convenience API."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path

from profstore import open_store, render_listing


def _collect_run(profiler: cProfile.Profile) -> dict[str, object]:
    """Flatten cProfile stats into a ``{"caller==>callee": metrics}`` run."""
    stats = pstats.Stats(profiler)
    run: dict[str, object] = {}
    for (filename, line, func), (_, calls, _, cumulative, callers) in stats.stats.items():
        callee = f"{Path(filename).name}:{line}({func})"
        run[callee] = {"ct": calls, "wt": int(cumulative * 1_000_000)}
        for caller_filename, caller_line, caller_func in callers:
            caller = f"{Path(caller_filename).name}:{caller_line}({caller_func})"
            run[f"{caller}==>{callee}"] = {"ct": calls}
    return run


def _work() -> int:
    return sum(i * i for i in range(100_000))


def main() -> None:
    output_dir = Path("artifacts") / "runs"
    output_dir.mkdir(parents=True, exist_ok=True)
    store = open_store(output_dir)

    profiler = cProfile.Profile()
    profiler.runcall(_work)
    run_id = store.save_run(_collect_run(profiler), "example")

    run, description = store.get_run(run_id, "example")
    print(f"{description}: {len(run or {})} entries, run id {run_id}")
    print(render_listing(store.list_runs()))


if __name__ == "__main__":
    main()
