from __future__ import annotations

import heapq
import itertools
import math

from ..graph.model import WordGraph
from .results import PathResult, Status, missing_words, normalize_word


def _dijkstra(
    graph: WordGraph, source: str, target: str | None = None
) -> tuple[dict[str, float], dict[str, str]]:
    """Lazy-relaxation Dijkstra from `source`.

    Nodes may sit in the heap several times; an entry whose node is already
    settled is stale and skipped. Equal distances pop in discovery order. Stops
    as soon as `target` is settled, when given.
    """
    dist: dict[str, float] = {source: 0}
    prev: dict[str, str] = {}
    settled: set[str] = set()
    counter = itertools.count()
    heap: list[tuple[float, int, str]] = [(0, next(counter), source)]

    while heap:
        d, _, current = heapq.heappop(heap)
        if current in settled:
            continue
        settled.add(current)
        if current == target:
            break

        for nbr, weight in graph.neighbors(current).items():
            nd = d + weight
            if nd < dist.get(nbr, math.inf):
                dist[nbr] = nd
                prev[nbr] = current
                heapq.heappush(heap, (nd, next(counter), nbr))

    return dist, prev


def _walk_back(prev: dict[str, str], source: str, target: str) -> tuple[str, ...]:
    path = [target]
    while path[-1] != source:
        path.append(prev[path[-1]])
    path.reverse()
    return tuple(path)


def shortest_path(graph: WordGraph, a: str, b: str) -> PathResult:
    missing = missing_words(graph, a, b)
    if missing:
        return PathResult(source=a, target=b, status=Status.MISSING, missing=missing)

    src, dst = normalize_word(a), normalize_word(b)
    dist, prev = _dijkstra(graph, src, dst)
    if math.isinf(dist.get(dst, math.inf)):
        return PathResult(source=a, target=b, status=Status.EMPTY)

    return PathResult(
        source=a,
        target=b,
        status=Status.OK,
        path=_walk_back(prev, src, dst),
        distance=int(dist[dst]),
    )


def shortest_paths_from(graph: WordGraph, a: str) -> dict[str, PathResult]:
    """Shortest path from `a` to every other node, keyed by node in graph order."""
    src = normalize_word(a)
    if src not in graph:
        return {}

    dist, prev = _dijkstra(graph, src)
    out: dict[str, PathResult] = {}
    for node in graph.nodes():
        if node == src:
            continue
        if node not in dist:
            out[node] = PathResult(source=a, target=node, status=Status.EMPTY)
            continue
        out[node] = PathResult(
            source=a,
            target=node,
            status=Status.OK,
            path=_walk_back(prev, src, node),
            distance=int(dist[node]),
        )
    return out
