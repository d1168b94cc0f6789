from __future__ import annotations

import random
from typing import Protocol, Sequence


class Chooser(Protocol):
    """Anything with `random.Random.choice` semantics."""

    def choice(self, seq: Sequence[str]) -> str: ...


class StopSignal(Protocol):
    def is_set(self) -> bool: ...


def make_rng(seed: int | None = None) -> random.Random:
    # No seed: OS entropy, not reproducible.
    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)
