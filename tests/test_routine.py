import re

import pytest

from dinner.routine import format_action, philo_routine, print_action
from dinner.table import init
from dinner.timing import get_time_ms


@pytest.fixture
def table():
    return init(["3", "800", "200", "200"])


def test_format_action_without_elapsed_time(table):
    table.since_start = 5000
    philo = table.philos[1]
    assert format_action(philo, "is sleeping", 5000) == "0 1 is sleeping"


def test_format_action_fields(table):
    table.since_start = 7000
    philo = table.philos[2]
    line = format_action(philo, "has taken a fork", 9000)
    elapsed, ident, text = line.split(" ", 2)
    assert int(elapsed) == 9000 - 7000
    assert int(ident) == philo.id
    assert text == "has taken a fork"


def test_print_action_writes_one_line(table, capsys):
    table.since_start = get_time_ms()
    print_action(table.philos[0], "is eating")
    out = capsys.readouterr().out
    match = re.fullmatch(r"(\d+) 0 is eating\n", out)
    assert match is not None
    assert int(match.group(1)) % 1000 == 0


def test_philo_routine_prints_and_releases_lock(table, capsys):
    table.since_start = get_time_ms()
    result = philo_routine(table.philos[2])
    out = capsys.readouterr().out
    assert result is None
    assert re.fullmatch(r"\d+ 2 is sleeping\n", out)
    assert table.control.acquire(blocking=False)
    table.control.release()