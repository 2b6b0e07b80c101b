import io
import re

from philosim.settings import Settings
from philosim.simulation import Philosopher, Simulation

LINE = re.compile(
    r"^(\d+) (\d+) (has taken a fork|is eating|is sleeping|is thinking|died)$"
)


def _lines(out):
    return out.getvalue().splitlines()


def test_philosophers_sit_around_a_ring():
    sim = Simulation(Settings(3, 800, 200, 200), io.StringIO())
    assert [(p.id, p.left_fork, p.right_fork) for p in sim.philosophers] == [
        (1, 0, 1),
        (2, 1, 2),
        (3, 2, 0),
    ]
    assert all(p.meals_eaten == 0 for p in sim.philosophers)


def test_set_dead_and_is_dead():
    sim = Simulation(Settings(2, 800, 200, 200), io.StringIO())
    assert sim.is_dead() is False
    sim.set_dead()
    assert sim.is_dead() is True


def test_print_status_format():
    out = io.StringIO()
    sim = Simulation(Settings(2, 800, 200, 200), out)
    sim.print_status(sim.philosophers[1], "is thinking")
    (line,) = _lines(out)
    match = LINE.match(line)
    assert match is not None
    assert match.group(2) == "2"
    assert match.group(3) == "is thinking"


def test_print_status_silent_after_death():
    out = io.StringIO()
    sim = Simulation(Settings(2, 800, 200, 200), out)
    sim.set_dead()
    sim.print_status(Philosopher(1, 0, 1, 0), "is eating")
    assert out.getvalue() == ""


def test_elapsed_ms_is_non_negative():
    sim = Simulation(Settings(1, 800, 200, 200), io.StringIO())
    assert sim.elapsed_ms() >= 0


def test_single_philosopher_dies():
    out = io.StringIO()
    sim = Simulation(Settings(1, 60, 10, 10), out)
    sim.run()
    lines = _lines(out)
    assert lines[-1].endswith(" 1 died")
    assert all("has taken a fork" not in line for line in lines)
    assert int(lines[-1].split()[0]) >= 60
    assert sim.is_dead() is True


def test_everyone_eats_enough_and_nobody_dies():
    out = io.StringIO()
    sim = Simulation(Settings(4, 410, 100, 100, 3), out)
    sim.run()
    lines = _lines(out)
    assert all(LINE.match(line) for line in lines)
    assert not any(line.endswith("died") for line in lines)
    assert all(p.meals_eaten >= 3 for p in sim.philosophers)
    stamps = [int(line.split()[0]) for line in lines]
    assert stamps == sorted(stamps)


def test_starvation_stops_output():
    out = io.StringIO()
    sim = Simulation(Settings(2, 100, 200, 100), out)
    sim.run()
    lines = _lines(out)
    died = [line for line in lines if line.endswith("died")]
    assert len(died) == 1
    assert lines[-1] == died[0]
    assert all(LINE.match(line) for line in lines)