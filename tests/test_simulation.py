import threading
from unittest.mock import patch

import pytest

from dinner.simulation import SimulationError, start_simulation
from dinner.table import init


def test_every_philosopher_reports_once(capsys):
    table = init(["5", "800", "200", "200"])
    start_simulation(table)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == table.philo_count
    ids = sorted(int(line.split(" ", 2)[1]) for line in lines)
    assert ids == list(range(table.philo_count))
    assert all(line.split(" ", 2)[2] == "is sleeping" for line in lines)


def test_start_times_are_shared(capsys):
    table = init(["4", "800", "200", "200"])
    start_simulation(table)
    capsys.readouterr()
    assert table.since_start % 1000 == 0
    assert all(p.since_last_meal == table.since_start for p in table.philos)


def test_all_threads_finish(capsys):
    table = init(["3", "800", "200", "200"])
    start_simulation(table)
    capsys.readouterr()
    assert all(p.thread is not None for p in table.philos)
    assert not any(p.thread.is_alive() for p in table.philos)


def test_thread_start_failure_raises():
    table = init(["2", "800", "200", "200"])
    with patch.object(
        threading.Thread, "start", side_effect=RuntimeError("can't start new thread")
    ):
        with pytest.raises(SimulationError) as info:
            start_simulation(table)
    assert str(info.value) == "Resource temporarily unavailable"


def test_thread_join_failure_raises(capsys):
    table = init(["2", "800", "200", "200"])
    with patch.object(
        threading.Thread,
        "join",
        side_effect=RuntimeError("cannot join thread before it is started"),
    ):
        with pytest.raises(SimulationError) as info:
            start_simulation(table)
    assert str(info.value) == "Invalid argument"
    for philo in table.philos:
        philo.thread.join()
    capsys.readouterr()