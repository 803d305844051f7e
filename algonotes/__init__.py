"""Classic algorithms and data structures: geometry, number theory, combinatorics, linear programming, strings, grammars, graphs, flows, Fenwick trees and treaps."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "polygons",
    "numtheory",
    "combinatorics",
    "linalg",
    "strings",
    "grammar",
    "graphs",
    "flows",
    "fenwick",
    "treap",
]