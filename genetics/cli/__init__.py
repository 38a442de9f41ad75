"""Command line interface for Genetics."""

from .app import app

__all__ = ["app"]
