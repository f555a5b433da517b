"""Solutions to classic programming-contest practice problems."""

__version__ = "0.1.0"
__all__ = [
    "connectivity",
    "numeric",
    "optimization",
    "rational",
    "ranking",
    "records",
    "shortest_paths",
    "sorting",
    "text",
    "trees",
]