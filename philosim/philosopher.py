"""What each philosopher thread does: eat, sleep, think, until the table ends."""

from __future__ import annotations

from philosim.table import Philosopher, now_ms

_THINK_CAP_THRESHOLD = 600
_THINK_CAP = 200


def _is_full(philosopher: Philosopher) -> bool:
    return philosopher.meals_eaten == philosopher.table.settings.meals


def eat(philosopher: Philosopher) -> None:
    """Take both forks, eat, put the forks down and then sleep.

    Does nothing once the simulation is over or the philosopher has eaten
    the required number of meals.
    """
    table = philosopher.table
    settings = table.settings
    if table.is_over or _is_full(philosopher):
        return
    if not table.take_fork(philosopher, "left"):
        return
    if not table.take_fork(philosopher, "right"):
        return
    if table.is_over:
        table.release_forks(philosopher)
        return
    table.write_status(philosopher, "has taken a fork")
    if table.is_over:
        table.release_forks(philosopher)
        return
    table.write_status(philosopher, "is eating")
    philosopher.last_eat = now_ms()
    table.sleep_for(settings.time_to_eat, philosopher)
    philosopher.meals_eaten += 1
    table.release_forks(philosopher)
    if table.is_over or _is_full(philosopher):
        return
    table.write_status(philosopher, "is sleeping")
    table.sleep_for(settings.time_to_sleep, philosopher)


def think(philosopher: Philosopher, silent: bool) -> None:
    """Wait for about half of the slack left before the philosopher starves.

    The wait is never negative and is cut to 200 ms when it would exceed
    600 ms. Unless ``silent``, "is thinking" is announced first.
    """
    table = philosopher.table
    settings = table.settings
    slack = settings.time_to_die - (now_ms() - philosopher.last_eat) - settings.time_to_eat
    duration = max(slack, 0) // 2
    if duration > _THINK_CAP_THRESHOLD:
        duration = _THINK_CAP
    if table.is_over or _is_full(philosopher):
        return
    if not silent:
        table.write_status(philosopher, "is thinking")
    table.sleep_for(duration, philosopher)


def run_philosopher(philosopher: Philosopher) -> None:
    """Thread body of a philosopher at a table of two or more."""
    table = philosopher.table
    philosopher.last_eat = table.start_time
    table.wait_until(table.start_time)
    if philosopher.id % 2 == 0:
        think(philosopher, True)
    while not table.is_over:
        if _is_full(philosopher):
            # Nothing left to do but wait for the monitor to end the run.
            table.sleep_for(1, philosopher)
            continue
        eat(philosopher)
        think(philosopher, False)
    table.release_forks(philosopher)


def run_single(philosopher: Philosopher) -> None:
    """A lone philosopher takes its only fork and starves."""
    table = philosopher.table
    deadline = now_ms() + table.settings.time_to_die
    table.write_status(philosopher, "has taken a fork")
    table.wait_until(deadline)
    table.write_status(philosopher, "has died")