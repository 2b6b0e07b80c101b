"""Dining philosophers simulation with threads, a shared fork table and a death monitor."""

__version__ = "0.1.0"