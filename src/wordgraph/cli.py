from __future__ import annotations

import logging
import signal
import threading
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .config import Settings
from .graph.model import WordGraph
from .ingest import CorpusError, load_graph, write_walk
from .query import (
    Status,
    augment,
    bridge_words,
    iter_walk,
    shortest_path,
    shortest_paths_from,
)
from .query.results import normalize_word
from .query.rng import make_rng
from .render import (
    Highlight,
    RenderError,
    annotations_for_augmentation,
    annotations_for_path,
    render_dot,
    to_dot,
)


app = typer.Typer(add_completion=False, help="Word Graph Studio: word adjacency graphs from plain text.")
console = Console()

logger = logging.getLogger("wordgraph")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Log level (default: WORDGRAPH_LOG_LEVEL or WARNING)"),
):
    """Build a directed word graph from a text file and query it."""
    settings = Settings()
    level = (log_level or settings.log_level).strip().upper()
    if level not in _LOG_LEVELS:
        raise typer.BadParameter(
            f"Unknown log level {level!r}; use one of: {', '.join(_LOG_LEVELS)}",
            param_hint="--log-level / WORDGRAPH_LOG_LEVEL",
        )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


CorpusOpt = typer.Option(..., "--corpus", "-c", exists=True, file_okay=True, dir_okay=False, help="UTF-8 text file")


def _load(corpus: Path) -> WordGraph:
    try:
        graph, stats = load_graph(corpus)
    except CorpusError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(code=2)
    logger.debug("Corpus stats: %s", stats)
    return graph


def _render(graph: WordGraph, highlight: Highlight | None, stem: str, out_dir: Path | None) -> None:
    settings = Settings()
    base = out_dir or Path(settings.out_dir)
    base.mkdir(parents=True, exist_ok=True)

    source = to_dot(graph, highlight)
    dot_path = base / f"{stem}.dot"
    dot_path.write_text(source, encoding="utf-8")
    console.print(f"DOT source: {dot_path}", markup=False)

    try:
        img = render_dot(
            source,
            base / f"{stem}.{settings.image_format}",
            fmt=settings.image_format,
            dot_binary=settings.dot_binary,
        )
    except RenderError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(code=2)
    console.print(f"Graph rendered: {img.resolve()}", markup=False, style="green")


def _seed(seed: int | None) -> int | None:
    return seed if seed is not None else Settings().seed


@app.command()
def show(
    corpus: Path = CorpusOpt,
    render: bool = typer.Option(False, "--render/--no-render", help="Write DOT source and render an image"),
    out_dir: Path | None = typer.Option(None, "--out-dir", help="Output directory (default: WORDGRAPH_OUT_DIR)"),
    limit: int = typer.Option(200, help="Max edges to print"),
):
    """Show the directed graph as an edge table."""
    graph = _load(corpus)

    table = Table(title=f"Word graph ({len(graph)} nodes, {graph.edge_count} edges)")
    table.add_column("from")
    table.add_column("to")
    table.add_column("weight", justify="right")
    for i, (src, dst, w) in enumerate(graph.edges()):
        if i >= limit:
            break
        table.add_row(Text(src), Text(dst), Text(str(w)))
    console.print(table)
    if graph.edge_count > limit:
        console.print(f"... {graph.edge_count - limit} more edges", markup=False)

    if render:
        _render(graph, None, "graph", out_dir)


@app.command()
def bridge(
    word1: str = typer.Argument(...),
    word2: str = typer.Argument(...),
    corpus: Path = CorpusOpt,
):
    """Query bridge words from WORD1 to WORD2."""
    graph = _load(corpus)
    res = bridge_words(graph, word1, word2)
    console.print(res.message(), markup=False)
    if res.status is Status.MISSING:
        raise typer.Exit(code=1)


@app.command("augment")
def augment_cmd(
    text: str = typer.Argument(..., help="Text to enrich with bridge words"),
    corpus: Path = CorpusOpt,
    seed: int | None = typer.Option(None, "--seed", help="Random seed (default: WORDGRAPH_SEED or OS entropy)"),
    render: bool = typer.Option(False, "--render/--no-render", help="Render the graph with inserted words highlighted"),
    out_dir: Path | None = typer.Option(None, "--out-dir"),
):
    """Generate new text by inserting bridge words between adjacent words."""
    graph = _load(corpus)
    aug = augment(graph, text, make_rng(_seed(seed)))
    console.print(aug.text, markup=False)

    if render:
        _render(graph, annotations_for_augmentation(aug), "augment", out_dir)


@app.command()
def path(
    word1: str = typer.Argument(...),
    word2: str | None = typer.Argument(None, help="Omit to list paths to every other word"),
    corpus: Path = CorpusOpt,
    render: bool = typer.Option(False, "--render/--no-render", help="Render the graph with the path highlighted"),
    out_dir: Path | None = typer.Option(None, "--out-dir"),
):
    """Shortest weighted path from WORD1 to WORD2."""
    graph = _load(corpus)

    if word2 is None:
        if normalize_word(word1) not in graph:
            console.print(f"No {word1} in the graph!", markup=False)
            raise typer.Exit(code=1)
        results = shortest_paths_from(graph, word1)
        if not results:
            console.print(f"No other words in the graph besides {word1}.", markup=False)
        for res in results.values():
            style = None if res.status is Status.OK else "yellow"
            console.print(res.message(), markup=False, style=style)
        return

    res = shortest_path(graph, word1, word2)
    console.print(res.message(), markup=False)
    if res.status is Status.MISSING:
        raise typer.Exit(code=1)

    if render and res.status is Status.OK:
        _render(graph, annotations_for_path(res), "path", out_dir)


@app.command()
def walk(
    corpus: Path = CorpusOpt,
    seed: int | None = typer.Option(None, "--seed", help="Random seed (default: WORDGRAPH_SEED or OS entropy)"),
    out: Path | None = typer.Option(None, "--out", help="Write the walk as space-joined words"),
    step_delay: float = typer.Option(0.0, "--step-delay", help="Seconds to pause between steps"),
):
    """Random walk until a dead end or a repeated edge. Ctrl-C stops early."""
    graph = _load(corpus)
    stop = threading.Event()

    prev_handler = None
    if threading.current_thread() is threading.main_thread():
        prev_handler = signal.signal(signal.SIGINT, lambda *_: stop.set())

    nodes: list[str] = []
    try:
        for node in iter_walk(graph, rng=make_rng(_seed(seed)), stop=stop):
            nodes.append(node)
            console.print(node, markup=False)
            if step_delay > 0:
                time.sleep(step_delay)
    finally:
        if prev_handler is not None:
            signal.signal(signal.SIGINT, prev_handler)

    if stop.is_set():
        console.print("Walk interrupted.", style="yellow")
    console.print(" ".join(nodes), markup=False, style="bold")

    if out is not None:
        written = write_walk(nodes, out)
        console.print(f"Wrote walk to {written}", markup=False)


@app.command()
def stats(corpus: Path = CorpusOpt):
    """Show corpus and graph stats."""
    try:
        graph, res = load_graph(corpus)
    except CorpusError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(code=2)

    table = Table(title="Word Graph Stats")
    table.add_column("Metric")
    table.add_column("Value")
    for k, v in res.items():
        table.add_row(k, str(v))
    dead_ends = sum(1 for n in graph.nodes() if not graph.neighbors(n))
    table.add_row("dead_ends", str(dead_ends))
    console.print(table)


@app.command()
def serve(
    corpus: Path = CorpusOpt,
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
):
    """Serve the graph queries as a JSON API (FastAPI)."""
    try:
        import uvicorn
    except ImportError:
        console.print("Missing web dependencies. Install: `pip install -e '.[web]'`", style="red")
        raise typer.Exit(code=2)

    from .web.server import create_app

    try:
        app_ = create_app(corpus_path=str(corpus), seed=Settings().seed)
    except CorpusError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(code=2)
    uvicorn.run(app_, host=host, port=int(port))


if __name__ == "__main__":
    app()
