from .edge_iter import EdgeIterator, edges

__all__ = [
    "EdgeIterator",
    "edges",
    ]
