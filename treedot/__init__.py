"""Labelled parse trees with indented text dumps and Graphviz DOT conversion."""

__version__ = "0.1.0"
__all__ = ["dot", "tree"]