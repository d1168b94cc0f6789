from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping


class WordGraph:
    """Immutable directed word graph with integer edge weights.

    Nodes and each node's out-neighbors enumerate in insertion order (first
    time a token was seen, first time an edge was created). Bridge-word listing
    and shortest-path tie-breaks depend on that order, so it is part of the
    public contract.
    """

    __slots__ = ("_adj", "_edge_count")

    def __init__(self, adjacency: Mapping[str, Mapping[str, int]] | None = None):
        adj: dict[str, dict[str, int]] = {}
        edge_count = 0
        for src, nbrs in (adjacency or {}).items():
            adj.setdefault(src, {})
            for dst, weight in nbrs.items():
                weight = int(weight)
                if weight < 1:
                    raise ValueError(f"Edge {src!r} -> {dst!r} has weight {weight}; weights must be >= 1")
                adj.setdefault(dst, {})
                adj[src][dst] = weight
                edge_count += 1

        self._adj = MappingProxyType({k: MappingProxyType(v) for k, v in adj.items()})
        self._edge_count = edge_count

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[str, str, int]]) -> "WordGraph":
        adj: dict[str, dict[str, int]] = {}
        for src, dst, weight in edges:
            adj.setdefault(src, {})[dst] = adj.get(src, {}).get(dst, 0) + int(weight)
            adj.setdefault(dst, {})
        return cls(adj)

    def __contains__(self, word: object) -> bool:
        return word in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"WordGraph(nodes={len(self)}, edges={self._edge_count})"

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def nodes(self) -> list[str]:
        return list(self._adj)

    def neighbors(self, word: str) -> Mapping[str, int]:
        """Read-only {destination: weight} for `word`; empty for unknown words."""
        return self._adj.get(word, _EMPTY)

    def has_edge(self, src: str, dst: str) -> bool:
        return dst in self._adj.get(src, _EMPTY)

    def weight(self, src: str, dst: str) -> int | None:
        return self._adj.get(src, _EMPTY).get(dst)

    def edges(self) -> Iterator[tuple[str, str, int]]:
        for src, nbrs in self._adj.items():
            for dst, weight in nbrs.items():
                yield src, dst, weight

    def as_dict(self) -> dict[str, dict[str, int]]:
        return {src: dict(nbrs) for src, nbrs in self._adj.items()}


_EMPTY: Mapping[str, int] = MappingProxyType({})
