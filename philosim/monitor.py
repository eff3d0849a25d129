"""The observer that detects starvation and the end of the meal count."""

from __future__ import annotations

import time

from philosim.table import Philosopher, Table, now_ms

_POLL_SECONDS = 0.0005


def has_died(philosopher: Philosopher) -> bool:
    """Whether the philosopher has gone ``time_to_die`` ms without eating."""
    return now_ms() - philosopher.last_eat >= philosopher.table.settings.time_to_die


def is_done(table: Table) -> bool:
    """Check every philosopher once and end the simulation if it is over.

    A starved philosopher that has not finished its meals is announced as
    dead. With a meal count, the run ends once every philosopher reached it.
    """
    meals = table.settings.meals
    for philosopher in table.philosophers:
        if has_died(philosopher) and philosopher.meals_eaten != meals:
            table.write_status(philosopher, "has died")
            table.finish()
            return True
        if meals is not None and philosopher.meals_eaten < meals:
            return False
    if meals is not None:
        table.finish()
        return True
    return False


def run_monitor(table: Table) -> None:
    """Thread body of the monitor: poll until the simulation ends."""
    table.wait_until(table.start_time)
    while not (is_done(table) or table.is_over):
        time.sleep(_POLL_SECONDS)