from __future__ import annotations

from ..graph.model import WordGraph
from .results import BridgeResult, Status, missing_words, normalize_word


def find_bridges(graph: WordGraph, a: str, b: str) -> list[str]:
    """Words w with edges a -> w and w -> b, in a's neighbor order.

    `a` and `b` are matched as given; unknown words simply yield no bridges.
    """
    return [w for w in graph.neighbors(a) if graph.has_edge(w, b)]


def bridge_words(graph: WordGraph, a: str, b: str) -> BridgeResult:
    missing = missing_words(graph, a, b)
    if missing:
        return BridgeResult(source=a, target=b, status=Status.MISSING, missing=missing)

    words = find_bridges(graph, normalize_word(a), normalize_word(b))
    if not words:
        return BridgeResult(source=a, target=b, status=Status.EMPTY)
    return BridgeResult(source=a, target=b, status=Status.OK, words=tuple(words))
