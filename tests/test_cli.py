import io

import pytest

from philosim.cli import main, run_simulation
from philosim.table import Settings, Table

MESSAGES = {"has taken a fork", "is eating", "is sleeping", "is thinking", "has died"}


def _parse(text):
    rows = []
    for line in text.splitlines():
        stamp, ident, message = line.split(" ", 2)
        rows.append((int(stamp), int(ident), message))
    return rows


@pytest.mark.parametrize("argv", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err.strip() == "invalid number of args"


@pytest.mark.parametrize("argv", [["abc", "2", "3", "4"], ["0", "200", "100", "100"],
                                  ["2", "-5", "100", "100"], ["2", "200", "100", "100", "0"]])
def test_invalid_arguments(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err.strip() == "invalid arguments"


def test_single_philosopher_dies(capsys):
    assert main(["1", "50", "10", "10"]) == 0
    rows = _parse(capsys.readouterr().out)
    assert [message for _, _, message in rows] == ["has taken a fork", "has died"]
    assert rows[1][0] - rows[0][0] >= 50


def test_meal_count_ends_simulation(capsys):
    assert main(["2", "400", "50", "50", "2"]) == 0
    rows = _parse(capsys.readouterr().out)
    assert all(message in MESSAGES for _, _, message in rows)
    assert all(ident in (1, 2) for _, ident, _ in rows)
    assert not any(message == "has died" for _, _, message in rows)
    for ident in (1, 2):
        meals = [m for _, i, m in rows if i == ident and m == "is eating"]
        assert len(meals) == 2
    stamps = [stamp for stamp, _, _ in rows]
    assert stamps == sorted(stamps)


def test_starvation_is_reported_once(capsys):
    assert main(["3", "100", "200", "200"]) == 0
    rows = _parse(capsys.readouterr().out)
    assert sum(1 for _, _, message in rows if message == "has died") == 1


def test_run_simulation_with_table():
    out = io.StringIO()
    table = Table(Settings(count=3, time_to_die=600, time_to_eat=20,
                           time_to_sleep=20, meals=1), output=out)
    run_simulation(table)
    assert table.is_over
    assert all(p.meals_eaten >= 1 for p in table.philosophers)
    assert all(not fork.locked() for fork in table.forks)
    assert "has died" not in out.getvalue()