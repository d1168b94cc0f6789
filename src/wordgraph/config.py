from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


load_dotenv()


def _env_seed() -> int | None:
    raw = os.getenv("WORDGRAPH_SEED", "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    # Where the CLI writes DOT sources, rendered images and walk files.
    out_dir: str = os.getenv("WORDGRAPH_OUT_DIR", "./out")

    # Graphviz
    dot_binary: str = os.getenv("WORDGRAPH_DOT_BINARY", "dot")
    image_format: str = os.getenv("WORDGRAPH_IMAGE_FORMAT", "png")

    # Unset means the CLI draws from SystemRandom.
    seed: int | None = field(default_factory=_env_seed)

    log_level: str = field(default_factory=lambda: os.getenv("WORDGRAPH_LOG_LEVEL", "WARNING"))
