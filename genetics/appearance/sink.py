"""Sinks receive each generated appearance. Generation never persists anything itself."""

import json
import logging
from pathlib import Path
from typing import Protocol

from ..core.models import Appearance

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, appearance: Appearance) -> None: ...


class MemorySink:
    """Collects appearances in a list."""

    def __init__(self) -> None:
        self.appearances: list[Appearance] = []

    def write(self, appearance: Appearance) -> None:
        self.appearances.append(appearance)

    def by_identifier(self) -> dict[str, Appearance]:
        return {a.identifier: a for a in self.appearances}


class JsonSink:
    """Writes all appearances to one JSON document when closed.

    Use as a context manager; nothing is written if the block raises.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._records: list[dict] = []

    def write(self, appearance: Appearance) -> None:
        self._records.append(appearance.to_record())

    def close(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump({"appearances": self._records}, f, indent=2)
        logger.info(f"Wrote {len(self._records)} appearances to {self.path}")

    def __enter__(self) -> "JsonSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
