"""Threaded dining-philosophers simulation with a death monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import TextIO

from .settings import Settings
from .timing import now_ms

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"


def _sleep_us(microseconds: float) -> None:
    time.sleep(microseconds / 1_000_000)


@dataclass
class Philosopher:
    """One diner at the table and the forks on either side of it."""

    id: int
    left_fork: int
    right_fork: int
    last_meal_time: int
    meals_eaten: int = 0


class Simulation:
    """Runs philosophers as threads until one starves or all have eaten enough."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self._dead = False
        self._print_lock = threading.Lock()
        self._death_lock = threading.Lock()
        self._fork_lock = threading.Lock()
        self.start_time = now_ms()
        n = settings.n_philos
        self._fork_available = [True] * n
        self.philosophers = [
            Philosopher(
                id=i + 1,
                left_fork=i,
                right_fork=(i + 1) % n,
                last_meal_time=now_ms(),
            )
            for i in range(n)
        ]

    def is_dead(self) -> bool:
        """Whether the simulation has ended."""
        with self._death_lock:
            return self._dead

    def set_dead(self) -> None:
        """Mark the simulation as ended."""
        with self._death_lock:
            self._dead = True

    def elapsed_ms(self) -> int:
        """Milliseconds since the simulation was created."""
        return now_ms() - self.start_time

    def print_status(self, philosopher: Philosopher, status: str) -> None:
        """Log a state change, unless the simulation has already ended."""
        with self._print_lock:
            if not self.is_dead():
                self._write(f"{self.elapsed_ms()} {philosopher.id} {status}")

    def run(self) -> None:
        """Start every philosopher and the monitor, and wait for them all."""
        workers = [
            threading.Thread(target=self._routine, args=(philosopher,), daemon=True)
            for philosopher in self.philosophers
        ]
        for worker in workers:
            worker.start()
        monitor = threading.Thread(target=self._monitor, daemon=True)
        monitor.start()
        monitor.join()
        for worker in workers:
            worker.join()

    def _write(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()

    def _routine(self, philosopher: Philosopher) -> None:
        settings = self.settings
        if philosopher.id % 2 == 0:
            _sleep_us(settings.t_eat * 5)
        while not self.is_dead():
            if (
                settings.has_meal_limit
                and philosopher.meals_eaten >= settings.meals_required
            ):
                break
            self._eat(philosopher)
            if self.is_dead():
                break
            self.print_status(philosopher, SLEEPING)
            _sleep_us(settings.t_sleep * 1000)
            if self.is_dead():
                break
            self.print_status(philosopher, THINKING)
            _sleep_us(5000)

    def _eat(self, philosopher: Philosopher) -> None:
        shared = self.settings.n_philos > 1
        while not self.is_dead():
            with self._fork_lock:
                ready = (
                    shared
                    and self._fork_available[philosopher.left_fork]
                    and self._fork_available[philosopher.right_fork]
                )
                if ready:
                    self._fork_available[philosopher.left_fork] = False
                    self._fork_available[philosopher.right_fork] = False
            if ready:
                self._dine(philosopher)
                return
            _sleep_us(250 if shared else 0)

    def _dine(self, philosopher: Philosopher) -> None:
        self.print_status(philosopher, TAKEN_FORK)
        self.print_status(philosopher, TAKEN_FORK)
        with self._death_lock:
            philosopher.last_meal_time = now_ms()
            philosopher.meals_eaten += 1
        self.print_status(philosopher, EATING)
        _sleep_us(self.settings.t_eat * 1000)
        with self._fork_lock:
            self._fork_available[philosopher.left_fork] = True
            self._fork_available[philosopher.right_fork] = True

    def _first_starving(self) -> int | None:
        """Mark and return the first philosopher past its deadline, if any."""
        current = now_ms()
        for philosopher in self.philosophers:
            with self._death_lock:
                if self._dead:
                    return None
                if current - philosopher.last_meal_time > self.settings.t_die:
                    self._dead = True
                    return philosopher.id
        return None

    def _all_fed(self) -> bool:
        for philosopher in self.philosophers:
            with self._death_lock:
                eaten = philosopher.meals_eaten
            if eaten < self.settings.meals_required:
                return False
        return True

    def _monitor(self) -> None:
        settings = self.settings
        if settings.n_philos == 1:
            _sleep_us(settings.t_die * 500 + 100)
        else:
            _sleep_us(settings.t_die * 500)
        while not self.is_dead():
            starving = self._first_starving()
            if starving is not None:
                with self._print_lock:
                    self._write(f"{self.elapsed_ms()} {starving} {DIED}")
            if (
                not self.is_dead()
                and settings.meals_required > 0
                and self._all_fed()
            ):
                self.set_dead()
            if not self.is_dead():
                _sleep_us(500)