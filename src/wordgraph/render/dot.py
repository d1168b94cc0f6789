from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from ..graph.model import WordGraph
from ..query.augment import Augmentation
from ..query.results import PathResult, Status


logger = logging.getLogger(__name__)

_NODE_HL = 'style=filled, fillcolor="#ffd166"'
_EDGE_HL = 'color="#ef476f", penwidth=2.5'


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class Highlight:
    nodes: frozenset[str] = field(default_factory=frozenset)
    edges: frozenset[tuple[str, str]] = field(default_factory=frozenset)


def annotations_for_path(result: PathResult) -> Highlight:
    if result.status is not Status.OK:
        return Highlight()
    return Highlight(nodes=frozenset(result.path), edges=frozenset(result.edges()))


def annotations_for_augmentation(aug: Augmentation) -> Highlight:
    nodes: set[str] = set()
    edges: set[tuple[str, str]] = set()
    for ins in aug.insertions:
        nodes.add(ins.bridge)
        edges.add((ins.left, ins.bridge))
        edges.add((ins.bridge, ins.right))
    return Highlight(nodes=frozenset(nodes), edges=frozenset(edges))


def _q(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_dot(graph: WordGraph, highlight: Highlight | None = None, *, name: str = "wordgraph") -> str:
    """DOT source with one labelled edge per graph edge."""
    hl = highlight or Highlight()
    lines = [f"digraph {_q(name)} {{", "  rankdir=LR;", "  node [shape=ellipse];"]

    # Isolated nodes would otherwise vanish from the drawing.
    for node in graph.nodes():
        attrs = f" [{_NODE_HL}]" if node in hl.nodes else ""
        lines.append(f"  {_q(node)}{attrs};")

    for src, dst, weight in graph.edges():
        attrs = f'label="{weight}"'
        if (src, dst) in hl.edges:
            attrs += f", {_EDGE_HL}"
        lines.append(f"  {_q(src)} -> {_q(dst)} [{attrs}];")

    lines.append("}")
    return "\n".join(lines) + "\n"


def render_dot(
    source: str,
    out_path: str | os.PathLike[str],
    *,
    fmt: str = "png",
    dot_binary: str = "dot",
    timeout_s: float = 60.0,
) -> Path:
    """Render DOT `source` to `out_path` with the Graphviz executable."""
    exe = shutil.which(dot_binary)
    if exe is None:
        raise RenderError(f"Graphviz executable {dot_binary!r} not found on PATH. Install graphviz to render images.")

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    try:
        proc = subprocess.run(
            [exe, f"-T{fmt}", "-o", str(out)],
            input=source.encode("utf-8"),
            capture_output=True,
            timeout=timeout_s,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise RenderError(f"Failed to run {dot_binary}: {e}") from e

    if proc.returncode != 0:
        raise RenderError(f"{dot_binary} exited with {proc.returncode}: {proc.stderr.decode('utf-8', 'replace').strip()}")

    logger.info("Rendered graph to %s", out)
    return out
