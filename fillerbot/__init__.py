"""A Filler game player and a printf-style formatter."""

__version__ = "0.1.0"

__all__ = [
    "board",
    "floatdigits",
    "floats",
    "numbers",
    "printf",
    "solver",
    "spec",
    "text",
]