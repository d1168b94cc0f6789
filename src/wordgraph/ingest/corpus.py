from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from ..graph.build import GraphBuilder
from ..graph.model import WordGraph


class CorpusError(RuntimeError):
    pass


def read_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of a UTF-8 text file without trailing newlines."""
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8", errors="replace") as f:
            for line in f:
                yield line.rstrip("\r\n")
    except OSError as e:
        raise CorpusError(f"Failed to read corpus {p}: {e}") from e


def load_graph(path: str | os.PathLike[str]) -> tuple[WordGraph, dict]:
    builder = GraphBuilder().feed_all(read_lines(path))
    return builder.finish(), builder.stats()


def write_walk(nodes: Iterable[str], path: str | os.PathLike[str]) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(" ".join(nodes) + "\n", encoding="utf-8")
    return out
