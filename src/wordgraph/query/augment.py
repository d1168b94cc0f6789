from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..graph.model import WordGraph
from ..graph.tokenize import tokenize
from .bridge import find_bridges
from .rng import Chooser, make_rng


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Insertion:
    # Index of the left term in the tokenized input.
    index: int
    left: str
    bridge: str
    right: str


@dataclass(frozen=True)
class Augmentation:
    text: str
    terms: tuple[str, ...]
    insertions: tuple[Insertion, ...] = field(default_factory=tuple)

def augment(graph: WordGraph, text: str, rng: Chooser | None = None) -> Augmentation:
    """Insert one random bridge word between every adjacent pair of terms that has any.

    Candidates come from the corpus graph only; `text` is never added to it.
    """
    rng = rng if rng is not None else make_rng()
    terms = tokenize(text)
    out: list[str] = []
    insertions: list[Insertion] = []

    for i, term in enumerate(terms):
        out.append(term)
        if i + 1 >= len(terms):
            break
        nxt = terms[i + 1]
        candidates = find_bridges(graph, term, nxt)
        if not candidates:
            continue
        chosen = rng.choice(candidates)
        out.append(chosen)
        insertions.append(Insertion(index=i, left=term, bridge=chosen, right=nxt))

    logger.debug("Augmented %d terms with %d bridge words", len(terms), len(insertions))
    return Augmentation(text=" ".join(out), terms=tuple(terms), insertions=tuple(insertions))


def augment_text(graph: WordGraph, text: str, rng: Chooser | None = None) -> str:
    return augment(graph, text, rng).text
