"""Command-line entry point of the dining-philosophers simulation."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from typing import Optional

from philosim.monitor import run_monitor
from philosim.parsing import ArgumentError, validate_arguments
from philosim.philosopher import run_philosopher, run_single
from philosim.table import Settings, SimulationError, Table, now_ms

_START_DELAY_PER_PHILOSOPHER = 20


def _start(target, arg, name: str) -> threading.Thread:
    thread = threading.Thread(target=target, args=(arg,), name=name, daemon=True)
    try:
        thread.start()
    except RuntimeError as exc:
        raise SimulationError("thread creation error") from exc
    return thread


def run_simulation(table: Table) -> None:
    """Run every philosopher and the monitor in threads until the table ends."""
    table.start_time = now_ms() + table.settings.count * _START_DELAY_PER_PHILOSOPHER
    started: list[threading.Thread] = []
    try:
        for philosopher in table.philosophers:
            philosopher.thread = _start(run_philosopher, philosopher, f"philosopher-{philosopher.id}")
            started.append(philosopher.thread)
        monitor = _start(run_monitor, table, "monitor")
    except SimulationError:
        table.finish()
        for thread in started:
            thread.join()
        raise
    monitor.join()
    for thread in started:
        thread.join()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, run the simulation and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (4, 5):
        print("invalid number of args", file=sys.stderr)
        return 1
    try:
        validate_arguments(args)
        table = Table(Settings.from_arguments(args))
    except (ArgumentError, SimulationError) as exc:
        print(str(exc) or "invalid arguments", file=sys.stderr)
        return 1
    try:
        if table.settings.count == 1:
            run_single(table.philosophers[0])
        else:
            run_simulation(table)
    except SimulationError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())