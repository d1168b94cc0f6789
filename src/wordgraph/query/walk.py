from __future__ import annotations

import logging
from typing import Iterator

from ..graph.model import WordGraph
from .rng import Chooser, StopSignal, make_rng


logger = logging.getLogger(__name__)


def iter_walk(graph: WordGraph, rng: Chooser | None = None, stop: StopSignal | None = None) -> Iterator[str]:
    """Yield the nodes of a random walk, start node first.

    The walk ends at a node without out-edges, or right after traversing a
    directed edge for the second time (its destination is still yielded).
    `stop`, when set, ends the walk before the next step.
    """
    rng = rng if rng is not None else make_rng()
    nodes = graph.nodes()
    if not nodes:
        return

    current = rng.choice(nodes)
    yield current

    visited: set[tuple[str, str]] = set()
    while stop is None or not stop.is_set():
        nbrs = list(graph.neighbors(current))
        if not nbrs:
            logger.debug("Walk reached dead end at %r", current)
            return

        nxt = rng.choice(nbrs)
        edge = (current, nxt)
        yield nxt
        if edge in visited:
            logger.debug("Walk repeated edge %r -> %r", current, nxt)
            return
        visited.add(edge)
        current = nxt

    logger.debug("Walk stopped by signal at %r", current)


def random_walk(graph: WordGraph, rng: Chooser | None = None, stop: StopSignal | None = None) -> list[str]:
    return list(iter_walk(graph, rng=rng, stop=stop))
