"""
Loaders Module - Input adapters producing writer triples.
"""

from .graph_loader import GraphLoader, load_file, load_graph

__all__ = ["GraphLoader", "load_file", "load_graph"]
