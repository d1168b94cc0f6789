from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..graph.model import WordGraph


class Status(str, Enum):
    OK = "ok"
    # One or both query words are not nodes of the graph.
    MISSING = "missing"
    # Well-formed query, nothing satisfies it (no bridge words / no path).
    EMPTY = "empty"


def normalize_word(word: str) -> str:
    return word.strip().lower()


def missing_words(graph: WordGraph, a: str, b: str) -> tuple[str, ...]:
    """Literal spellings of the query words that are not graph nodes."""
    return tuple(w for w in (a, b) if normalize_word(w) not in graph)


def missing_message(missing: tuple[str, ...]) -> str:
    return f"No {' or '.join(missing)} in the graph!"


@dataclass(frozen=True)
class BridgeResult:
    source: str
    target: str
    status: Status
    words: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()

    def message(self) -> str:
        if self.status is Status.MISSING:
            return missing_message(self.missing)
        if self.status is Status.EMPTY:
            return f"No bridge words from {self.source} to {self.target}!"
        return f"The bridge words from {self.source} to {self.target} are: {', '.join(self.words)}."

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "status": self.status.value,
            "words": list(self.words),
            "missing": list(self.missing),
            "message": self.message(),
        }


@dataclass(frozen=True)
class PathResult:
    source: str
    target: str
    status: Status
    path: tuple[str, ...] = ()
    distance: int | None = None
    missing: tuple[str, ...] = ()

    def message(self) -> str:
        if self.status is Status.MISSING:
            return missing_message(self.missing)
        if self.status is Status.EMPTY:
            return f"No path from {self.source} to {self.target}!"
        return f"Shortest path: {' -> '.join(self.path)} (Length: {self.distance})"

    def edges(self) -> list[tuple[str, str]]:
        return list(zip(self.path, self.path[1:]))

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "status": self.status.value,
            "path": list(self.path),
            "distance": self.distance,
            "missing": list(self.missing),
            "message": self.message(),
        }
