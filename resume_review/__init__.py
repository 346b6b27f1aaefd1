"""Heuristic resume scoring and job matching."""

__version__ = "0.1.0"
