"""Reader for the header elements of .cub scene files, with string, number, memory and I/O helpers."""

__version__ = "0.1.0"