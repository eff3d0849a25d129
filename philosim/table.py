"""Shared state of a dining-philosophers simulation: settings, forks and output."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional, TextIO

from philosim.parsing import ArgumentError, parse_number

_SIDES = ("left", "right")


class SimulationError(RuntimeError):
    """Raised when the simulation cannot be set up or run."""


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def _as_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def assign_forks(index: int, count: int) -> tuple[int, int]:
    """Return the (left, right) fork indices of the philosopher at ``index``.

    The last philosopher takes its own fork first and then fork 0; the others
    alternate the order by parity so that neighbours do not deadlock.
    """
    if index + 1 == count:
        return index, 0
    if index % 2 == 0:
        return index + 1, index
    return index, index + 1


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: Optional[int] = None

    @classmethod
    def from_arguments(cls, args: Sequence[str]) -> "Settings":
        """Build settings from the command-line arguments after the program name."""
        if len(args) not in (4, 5):
            raise ArgumentError("invalid number of args")
        meals = _as_int32(parse_number(args[4])) if len(args) == 5 else None
        return cls(
            count=_as_int32(parse_number(args[0])),
            time_to_die=parse_number(args[1]),
            time_to_eat=parse_number(args[2]),
            time_to_sleep=parse_number(args[3]),
            meals=meals,
        )


@dataclass(eq=False)
class Philosopher:
    """One diner and the forks it currently holds."""

    id: int
    left_fork: int
    right_fork: int
    table: "Table" = field(repr=False)
    last_eat: int = 0
    meals_eaten: int = 0
    holds_left: bool = False
    holds_right: bool = False
    thread: Optional[threading.Thread] = field(default=None, repr=False)


class Table:
    """The forks, the philosophers and the shared output of a simulation."""

    def __init__(self, settings: Settings, output: Optional[TextIO] = None) -> None:
        if settings.count < 1:
            raise SimulationError("invalid number of philosophers")
        self.settings = settings
        self.output = output if output is not None else sys.stdout
        self.forks = [threading.Lock() for _ in range(settings.count)]
        self._print_lock = threading.Lock()
        self._over = threading.Event()
        self.start_time = now_ms()
        self.philosophers = [
            Philosopher(
                index + 1,
                *assign_forks(index, settings.count),
                table=self,
                last_eat=self.start_time,
            )
            for index in range(settings.count)
        ]

    @property
    def is_over(self) -> bool:
        """Whether the simulation has ended."""
        return self._over.is_set()

    def take_fork(self, philosopher: Philosopher, side: str) -> bool:
        """Pick up the philosopher's left or right fork, blocking until free.

        Returns False without taking it once the simulation is over; in that
        case asking for the right fork also puts down what is already held.
        """
        if side not in _SIDES:
            raise ValueError(f"side must be 'left' or 'right', not {side!r}")
        if self.is_over:
            if side == "right":
                self.release_forks(philosopher)
            return False
        if side == "left":
            self.forks[philosopher.left_fork].acquire()
            philosopher.holds_left = True
        else:
            self.forks[philosopher.right_fork].acquire()
            philosopher.holds_right = True
        return True

    def release_forks(self, philosopher: Philosopher) -> None:
        """Put down every fork the philosopher holds."""
        if philosopher.holds_left:
            philosopher.holds_left = False
            self.forks[philosopher.left_fork].release()
        if philosopher.holds_right:
            philosopher.holds_right = False
            self.forks[philosopher.right_fork].release()

    def write_status(self, philosopher: Philosopher, message: str) -> bool:
        """Print ``<ms> <id> <message>`` unless the simulation is over.

        Returns whether the line was written; when it is not, the
        philosopher's forks are put down.
        """
        with self._print_lock:
            timestamp = now_ms()
            if self.is_over:
                self.release_forks(philosopher)
                return False
            print(f"{timestamp} {philosopher.id} {message}", file=self.output, flush=True)
            return True

    def wait_until(self, deadline: int) -> None:
        """Block until the clock reaches ``deadline`` milliseconds."""
        while (remaining := deadline - now_ms()) > 0:
            time.sleep(remaining / 1000)

    def sleep_for(self, duration: int, philosopher: Philosopher) -> bool:
        """Wait ``duration`` milliseconds, waking early if the simulation ends.

        Returns True if the full duration passed; on an early end the
        philosopher's forks are put down and False is returned.
        """
        deadline = now_ms() + duration
        while True:
            if self.is_over:
                self.release_forks(philosopher)
                return False
            remaining = deadline - now_ms()
            if remaining <= 0:
                return True
            time.sleep(min(remaining, 10) / 1000)

    def finish(self) -> None:
        """Mark the simulation as over."""
        self._over.set()