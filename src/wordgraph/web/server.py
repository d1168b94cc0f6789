from typing import Any


def create_app(*, corpus_path: str, seed: int | None = None):
    # Lazy import so the core CLI works without web deps.
    from fastapi import FastAPI
    from fastapi.responses import JSONResponse, PlainTextResponse

    from .. import __version__
    from ..ingest import load_graph
    from ..query import Status, augment, bridge_words, random_walk, shortest_path
    from ..query.rng import make_rng
    from ..render import annotations_for_path, to_dot

    # Built once; every endpoint only reads it.
    graph, stats = load_graph(corpus_path)

    app = FastAPI(title="Word Graph Studio", version=__version__)

    def _rng(payload: dict[str, Any]):
        # Missing or null seed falls back to the server seed.
        s = payload.get("seed")
        if s is None:
            return make_rng(seed)
        if isinstance(s, bool) or not isinstance(s, (int, str)):
            raise ValueError(f"seed must be an integer, got {s!r}")
        try:
            return make_rng(int(s))
        except ValueError:
            raise ValueError(f"seed must be an integer, got {s!r}") from None

    @app.get("/api/stats")
    def get_stats():
        return {"ok": True, "corpus": corpus_path, "stats": stats}

    @app.get("/api/graph")
    def get_graph():
        edges = [{"source": s, "target": t, "weight": w} for s, t, w in graph.edges()]
        return {"ok": True, "nodes": graph.nodes(), "edges": edges}

    @app.get("/api/graph.dot", response_class=PlainTextResponse)
    def get_dot(a: str | None = None, b: str | None = None):
        highlight = None
        if a and b:
            highlight = annotations_for_path(shortest_path(graph, a, b))
        return to_dot(graph, highlight)

    @app.get("/api/bridge")
    def get_bridge(a: str, b: str):
        res = bridge_words(graph, a, b)
        status_code = 404 if res.status is Status.MISSING else 200
        return JSONResponse({"ok": status_code == 200, "result": res.to_dict()}, status_code=status_code)

    @app.post("/api/augment")
    def post_augment(payload: dict[str, Any]):
        text = str(payload.get("text") or "")
        try:
            rng = _rng(payload)
        except ValueError as e:
            return JSONResponse({"ok": False, "error": str(e)}, status_code=400)
        aug = augment(graph, text, rng)
        return {
            "ok": True,
            "text": aug.text,
            "insertions": [
                {"index": i.index, "left": i.left, "bridge": i.bridge, "right": i.right} for i in aug.insertions
            ],
        }

    @app.get("/api/path")
    def get_path(a: str, b: str):
        res = shortest_path(graph, a, b)
        status_code = 404 if res.status is Status.MISSING else 200
        return JSONResponse({"ok": status_code == 200, "result": res.to_dict()}, status_code=status_code)

    @app.post("/api/walk")
    def post_walk(payload: dict[str, Any] | None = None):
        try:
            rng = _rng(payload or {})
        except ValueError as e:
            return JSONResponse({"ok": False, "error": str(e)}, status_code=400)
        nodes = random_walk(graph, rng=rng)
        return {"ok": True, "walk": nodes, "text": " ".join(nodes)}

    return app
