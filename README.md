# philosim

philosim is a console simulation of the dining philosophers problem. Each
philosopher runs in its own thread. Neighbours share forks, and each fork is
a lock. A monitor thread watches for a philosopher who starves. When a meal
count is given, the monitor also ends the run once every philosopher has
eaten that many times.

## Installation

```
pip install .
```

## Usage

```
philosim NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

The same program can also be started with `python -m philosim.cli`.

- `NUMBER_OF_PHILOSOPHERS`: how many philosophers sit at the table. There is one fork for each philosopher.
- `TIME_TO_DIE`: how many milliseconds a philosopher can go without starting a meal.
- `TIME_TO_EAT`: how many milliseconds a meal takes. A philosopher holds two forks while eating.
- `TIME_TO_SLEEP`: how many milliseconds a philosopher sleeps after a meal.
- `MEALS` (optional): the run ends once every philosopher has eaten this many times.

Every argument must be a non-zero number written only with the digits 0-9.
If the number of arguments is wrong, the program prints `invalid number of
args` on standard error. If an argument is malformed, it prints `invalid
arguments`. In both cases it exits with status 1. A run that ends, whether
through a death or because everyone has eaten enough, exits with status 0.

Example:

```
philosim 5 800 200 200 7
```

Each event is written to standard output as one line. The line holds the
wall-clock time in milliseconds, the philosopher's number (counting from 1)
and what happened:

```
1715600000123 1 has taken a fork
1715600000123 1 is eating
1715600000323 1 is sleeping
1715600000523 1 is thinking
```

The philosophers and the monitor all start together, a short moment after
launch: 20 ms for each philosopher. Even-numbered philosophers think quietly
first, so that their neighbours can eat.

The run ends when the monitor finds a philosopher who has gone
`TIME_TO_DIE` ms without eating and who has not yet finished their meals.
That philosopher is reported with `has died`. The run also ends when every
philosopher has eaten `MEALS` times. Nothing is printed after the run is
over.

With a single philosopher there is only one fork. The philosopher takes it,
waits `TIME_TO_DIE` ms and dies.

## Library use

- `philosim.parsing`
  - `parse_number(text)` reads the leading decimal number of a string, or a hexadecimal number after `0x`.
  - `validate_arguments(args)` checks the arguments and returns them parsed. It raises `ArgumentError` when one is malformed.
- `philosim.table`
  - `Settings` holds the parameters of a run. `Settings.from_arguments(args)` builds them from the command-line arguments that follow the program name.
  - `Table(settings, output=None)` holds the forks and the `Philosopher` objects. Status lines go to `output`, which defaults to standard output. Its methods are `take_fork`, `release_forks`, `write_status`, `wait_until`, `sleep_for` and `finish`, and `is_over` tells whether the run has ended.
  - `assign_forks(index, count)` returns a philosopher's fork order.
  - `now_ms()` returns the clock in milliseconds.
  - `SimulationError` is raised when a run cannot be set up or started.
- `philosim.philosopher`
  - `eat` and `think` are single steps of a philosopher.
  - `run_philosopher` and `run_single` are thread bodies.
- `philosim.monitor`
  - `has_died(philosopher)` tells whether a philosopher has starved.
  - `is_done(table)` runs one check of the whole table and ends the run when it is over.
  - `run_monitor(table)` is the monitor's thread body.
- `philosim.cli`
  - `run_simulation(table)` runs all threads until the table ends.
  - `main(argv=None)` is the command and returns its exit status.

## Running the tests

```
pip install .[test]
pytest
```