"""Genetics: reproducible procedural character appearances."""

__version__ = "0.1.0"
