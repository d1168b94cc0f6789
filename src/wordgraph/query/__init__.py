"""Read-only queries over a built WordGraph."""

from .augment import Augmentation, augment, augment_text
from .bridge import bridge_words
from .results import BridgeResult, PathResult, Status
from .shortest_path import shortest_path, shortest_paths_from
from .walk import iter_walk, random_walk

__all__ = [
    "Augmentation",
    "BridgeResult",
    "PathResult",
    "Status",
    "augment",
    "augment_text",
    "bridge_words",
    "iter_walk",
    "random_walk",
    "shortest_path",
    "shortest_paths_from",
]
