from .interfaces import SimpleGraphProto, MutableGraphProto
from .adjacency import SimpleGraph, SimpleDiGraph, add_edges
from .networkx_facade import GraphX, from_networkx, to_networkx, load_edgelist
from .generators import (
    empty_graph,
    path_graph,
    path_digraph,
    cycle_graph,
    cycle_digraph,
    complete_graph,
    complete_digraph,
    star_graph,
)

__all__ = [
    "SimpleGraphProto",
    "MutableGraphProto",
    "SimpleGraph",
    "SimpleDiGraph",
    "add_edges",
    "GraphX",
    "from_networkx",
    "to_networkx",
    "load_edgelist",
    "empty_graph",
    "path_graph",
    "path_digraph",
    "cycle_graph",
    "cycle_digraph",
    "complete_graph",
    "complete_digraph",
    "star_graph",
    ]
