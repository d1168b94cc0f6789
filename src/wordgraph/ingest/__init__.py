from .corpus import CorpusError, load_graph, read_lines, write_walk

__all__ = ["CorpusError", "load_graph", "read_lines", "write_walk"]
