"""Command-line settings for a dining-philosophers run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .timing import parse_int

NO_MEAL_LIMIT = -1


class SettingsError(ValueError):
    """Raised when the run's arguments are missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; times are in milliseconds."""

    n_philos: int
    t_die: int
    t_eat: int
    t_sleep: int
    meals_required: int = NO_MEAL_LIMIT

    @property
    def has_meal_limit(self) -> bool:
        return self.meals_required != NO_MEAL_LIMIT


def parse_settings(args: Sequence[str]) -> Settings:
    """Build settings from the four or five arguments after the program name."""
    if len(args) not in (4, 5):
        raise SettingsError("Error: Invalid number of arguments")
    n_philos, t_die, t_eat, t_sleep = (parse_int(arg) for arg in args[:4])
    meals_required = parse_int(args[4]) if len(args) == 5 else NO_MEAL_LIMIT
    if (
        n_philos <= 0
        or t_die <= 0
        or t_eat <= 0
        or t_sleep <= 0
        or (len(args) == 5 and meals_required <= 0)
    ):
        raise SettingsError("Error initializing vars")
    return Settings(n_philos, t_die, t_eat, t_sleep, meals_required)