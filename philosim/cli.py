"""Command-line entry point for the dining-philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from .settings import SettingsError, parse_settings
from .simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation: n_philos t_die t_eat t_sleep [meals_required]."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except SettingsError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    Simulation(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())