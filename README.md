# philosim

`philosim` is a threaded simulation of the dining philosophers problem.

The philosophers sit around a table. There is one fork between each pair of
neighbours. Each philosopher runs in its own thread. It repeats the same
cycle:

1. Take both of its forks.
2. Eat.
3. Put the forks back.
4. Sleep.
5. Think.

A monitor thread watches the table. It ends the simulation as soon as a
philosopher goes longer than the time to die without eating. If a number of
meals is given, the simulation also ends once every philosopher has eaten that
many times.

## Installation

```
pip install .
```

## Usage

```
philosim number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_required]
```

All times are in milliseconds. The command also runs as
`python -m philosim.cli` with the same arguments.

```
philosim 5 800 200 200
philosim 4 410 200 200 7
```

### How arguments are read

Each argument is read as the integer at its start:

- Leading whitespace is skipped.
- A single `+` or `-` sign is allowed.
- Reading stops at the first character that is not a digit.
- An argument with no leading digits counts as `0`.

Every value must come out greater than zero.

### Errors

In these cases a message goes to standard error and the command exits with
status 1:

- The number of arguments is not four or five. The message is
  `Error: Invalid number of arguments`.
- Any value is zero or negative. The message is `Error initializing vars`.

### Output

Each event is printed on its own line. A line holds three things, in this
order:

- the milliseconds since the start;
- the philosopher's number, counting from 1;
- the event.

For example:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
810 3 died
```

The events are:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

Once a philosopher has died, or every philosopher has eaten enough, no further
events are printed.

A philosopher sitting alone has only one fork. It never eats, and the monitor
reports its death.

## Library use

```python
import sys

from philosim.settings import parse_settings
from philosim.simulation import Simulation

settings = parse_settings(["5", "800", "200", "200", "3"])
Simulation(settings, sys.stdout).run()
```

### `philosim.settings`

`parse_settings(args)` takes the four or five arguments that follow the program
name and returns a frozen `Settings` dataclass. It raises `SettingsError` when
the arguments are not valid. `SettingsError` is a subclass of `ValueError`.

`Settings` has these fields:

- `n_philos`
- `t_die`
- `t_eat`
- `t_sleep`
- `meals_required`, which is `-1` when no limit is set

`has_meal_limit` tells whether a meal limit was set.

### `philosim.simulation`

`Simulation(settings, out)` writes its event lines to `out`, or to standard
output when `out` is `None`. It has these members:

- `run()` starts the philosopher threads and the monitor. It returns once a
  philosopher has died or every philosopher has eaten the required number of
  meals.
- `philosophers` is a list of `Philosopher` records. Each record holds `id`,
  `left_fork`, `right_fork`, `last_meal_time` and `meals_eaten`.
- `is_dead()` tells whether the simulation has ended.
- `set_dead()` ends the simulation.
- `elapsed_ms()` returns the milliseconds since the simulation was created.
- `print_status(philosopher, status)` writes one event line, unless the
  simulation has already ended.

### `philosim.timing`

`parse_int(text)` reads the integer at the start of `text` by the rules under
"How arguments are read". It never raises.

`now_ms()` returns the wall-clock time in whole milliseconds.

## Running the tests

```
pip install ".[test]"
pytest
```