"""Game Boy audio unit, memory model, settings, CPU test checking and graphics helpers."""

__version__ = "0.1.0"