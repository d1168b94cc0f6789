from wordgraph.graph.model import WordGraph


def graph_of(adjacency: dict[str, dict[str, int]]) -> WordGraph:
    return WordGraph(adjacency)


class FirstChooser:
    """Deterministic stand-in for random.Random that always takes the first option."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    def choice(self, seq):
        self.calls.append(list(seq))
        return seq[0]


class ScriptedChooser:
    """Returns the scripted picks in order."""

    def __init__(self, picks: list[str]) -> None:
        self._picks = list(picks)

    def choice(self, seq):
        pick = self._picks.pop(0)
        assert pick in seq, f"{pick!r} not among {list(seq)!r}"
        return pick
