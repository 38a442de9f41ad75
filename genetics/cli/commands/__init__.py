"""CLI commands for Genetics."""

from . import (
    config,
    validate,
    generate,
)

__all__ = [
    "config",
    "validate",
    "generate",
]
