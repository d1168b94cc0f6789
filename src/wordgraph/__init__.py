"""Word adjacency graphs built from plain text, with bridge-word, shortest-path and random-walk queries."""

__version__ = "0.1.0"
