"""Word adjacency graph: tokenizer, builder and the immutable graph model.

The graph is directed and weighted. An edge a -> b carries the number of times
token b directly followed token a anywhere in the corpus, including across line
breaks.
"""

from .build import GraphBuilder, build_graph
from .model import WordGraph
from .tokenize import iter_tokens, tokenize

__all__ = ["GraphBuilder", "WordGraph", "build_graph", "iter_tokens", "tokenize"]
