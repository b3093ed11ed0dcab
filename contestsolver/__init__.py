"""Solvers for four contest problems, each usable as a function or a command."""

__version__ = "0.1.0"
__all__ = ["booster", "reversals", "treedp", "trails"]