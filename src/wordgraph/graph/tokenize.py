from __future__ import annotations

import re
from typing import Iterable, Iterator


# Anything that is not a lowercase ASCII letter separates tokens.
_SEP_RE = re.compile(r"[^a-z]+")


def tokenize(line: str) -> list[str]:
    """Lowercase `line` and return its maximal runs of ASCII letters, in order."""
    return [t for t in _SEP_RE.split(line.lower()) if t]


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from tokenize(line)
