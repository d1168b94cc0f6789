import itertools
import random
import unittest

from wordgraph.graph.build import build_graph
from wordgraph.graph.model import WordGraph
from wordgraph.query.results import Status
from wordgraph.query.shortest_path import shortest_path, shortest_paths_from

from helpers import graph_of


def _brute_force(g: WordGraph, a: str, b: str) -> int | None:
    """Minimal a->b cost over all simple paths."""
    best = None
    nodes = [n for n in g.nodes() if n not in (a, b)]
    for r in range(len(nodes) + 1):
        for mid in itertools.permutations(nodes, r):
            seq = (a, *mid, b)
            cost = 0
            for s, d in zip(seq, seq[1:]):
                w = g.weight(s, d)
                if w is None:
                    break
                cost += w
            else:
                best = cost if best is None else min(best, cost)
    return best


class TestShortestPath(unittest.TestCase):
    def test_prefers_lighter_longer_route(self):
        g = graph_of({"a": {"b": 5, "c": 1}, "c": {"d": 1}, "d": {"b": 1}, "b": {}})
        res = shortest_path(g, "a", "b")
        self.assertIs(res.status, Status.OK)
        self.assertEqual(res.path, ("a", "c", "d", "b"))
        self.assertEqual(res.distance, 3)
        self.assertEqual(res.message(), "Shortest path: a -> c -> d -> b (Length: 3)")

    def test_same_word_is_zero_length(self):
        g = graph_of({"a": {"b": 1}, "b": {"a": 1}})
        res = shortest_path(g, "a", "a")
        self.assertEqual(res.path, ("a",))
        self.assertEqual(res.distance, 0)

    def test_unreachable(self):
        g = graph_of({"a": {"b": 1}, "c": {"a": 1}})
        res = shortest_path(g, "a", "c")
        self.assertIs(res.status, Status.EMPTY)
        self.assertEqual(res.message(), "No path from a to c!")

    def test_missing_words(self):
        g = graph_of({"a": {"b": 1}})
        self.assertEqual(shortest_path(g, "x", "b").message(), "No x in the graph!")
        self.assertEqual(shortest_path(g, "x", "y").message(), "No x or y in the graph!")
        self.assertIs(shortest_path(graph_of({}), "a", "a").status, Status.MISSING)

    def test_tie_broken_by_discovery_order(self):
        g = graph_of({"s": {"x": 1, "y": 1}, "x": {"t": 1}, "y": {"t": 1}, "t": {}})
        self.assertEqual(shortest_path(g, "s", "t").path, ("s", "x", "t"))

    def test_stale_heap_entries_are_ignored(self):
        # b is first queued at 10, then improved to 2 via c.
        g = graph_of({"a": {"b": 10, "c": 1}, "c": {"b": 1}, "b": {"d": 1}, "d": {}})
        res = shortest_path(g, "a", "d")
        self.assertEqual(res.path, ("a", "c", "b", "d"))
        self.assertEqual(res.distance, 3)

    def test_distance_equals_sum_of_weights_and_is_minimal(self):
        rng = random.Random(1234)
        words = ["w%d" % i for i in range(6)]
        for _ in range(30):
            edges = [
                (s, d, rng.randint(1, 9))
                for s in words
                for d in words
                if s != d and rng.random() < 0.35
            ]
            g = WordGraph.from_edges(edges)
            for a in g.nodes():
                for b in g.nodes():
                    if a == b:
                        continue
                    res = shortest_path(g, a, b)
                    expected = _brute_force(g, a, b)
                    if expected is None:
                        self.assertIs(res.status, Status.EMPTY)
                        continue
                    self.assertEqual(res.distance, expected)
                    self.assertEqual(res.path[0], a)
                    self.assertEqual(res.path[-1], b)
                    self.assertEqual(sum(g.weight(s, d) for s, d in res.edges()), res.distance)

    def test_built_from_text(self):
        g = build_graph(["to be or not to be", "that is the question"])
        res = shortest_path(g, "to", "question")
        self.assertEqual(res.path, ("to", "be", "that", "is", "the", "question"))
        self.assertEqual(res.distance, 6)

    def test_idempotent(self):
        g = graph_of({"a": {"b": 2, "c": 1}, "c": {"b": 1}})
        self.assertEqual(shortest_path(g, "a", "b"), shortest_path(g, "a", "b"))


class TestShortestPathsFrom(unittest.TestCase):
    def test_all_targets(self):
        g = graph_of({"a": {"b": 1, "c": 4}, "b": {"c": 1}, "c": {}, "d": {"a": 1}})
        out = shortest_paths_from(g, "a")
        self.assertEqual(list(out), ["b", "c", "d"])
        self.assertEqual(out["c"].path, ("a", "b", "c"))
        self.assertEqual(out["c"].distance, 2)
        self.assertIs(out["d"].status, Status.EMPTY)

    def test_unknown_source(self):
        self.assertEqual(shortest_paths_from(graph_of({"a": {"b": 1}}), "zzz"), {})


if __name__ == "__main__":
    unittest.main()
