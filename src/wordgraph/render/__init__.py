"""DOT export of a WordGraph, with optional highlighting of query results."""

from .dot import (
    Highlight,
    RenderError,
    annotations_for_augmentation,
    annotations_for_path,
    render_dot,
    to_dot,
)

__all__ = [
    "Highlight",
    "RenderError",
    "annotations_for_augmentation",
    "annotations_for_path",
    "render_dot",
    "to_dot",
]
