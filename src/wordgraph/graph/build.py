from __future__ import annotations

import logging
from typing import Any, Iterable

from .model import WordGraph
from .tokenize import tokenize


logger = logging.getLogger(__name__)


class GraphBuilder:
    """Accumulate token adjacency counts line by line.

    The previous token is carried across `feed` calls, so the last word of one
    line and the first word of the next form an edge.
    """

    def __init__(self) -> None:
        self._adj: dict[str, dict[str, int]] = {}
        self._prev: str | None = None
        self.lines_seen = 0
        self.tokens_seen = 0

    def feed(self, line: str) -> None:
        self.lines_seen += 1
        for tok in tokenize(line):
            self.tokens_seen += 1
            # Register every token as a node, even one that never has a successor.
            self._adj.setdefault(tok, {})
            if self._prev is not None:
                nbrs = self._adj[self._prev]
                nbrs[tok] = nbrs.get(tok, 0) + 1
            self._prev = tok

    def feed_all(self, lines: Iterable[str]) -> "GraphBuilder":
        for line in lines:
            self.feed(line)
        return self

    def stats(self) -> dict[str, Any]:
        return {
            "lines_seen": self.lines_seen,
            "tokens_seen": self.tokens_seen,
            "unique_nodes": len(self._adj),
            "unique_edges": sum(len(n) for n in self._adj.values()),
        }

    def finish(self) -> WordGraph:
        graph = WordGraph(self._adj)
        logger.info(
            "Built word graph: %d lines, %d tokens, %d nodes, %d edges",
            self.lines_seen,
            self.tokens_seen,
            len(graph),
            graph.edge_count,
        )
        return graph


def build_graph(lines: Iterable[str]) -> WordGraph:
    """Build a WordGraph from an iterable of text lines."""
    return GraphBuilder().feed_all(lines).finish()
