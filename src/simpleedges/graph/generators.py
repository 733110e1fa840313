import networkx as nx

from .adjacency import SimpleDiGraph, SimpleGraph
from .networkx_facade import from_networkx


def empty_graph(n: int, directed: bool = False) -> SimpleGraph | SimpleDiGraph:
    return SimpleDiGraph(n) if directed else SimpleGraph(n)


def path_graph(n: int) -> SimpleGraph:
    return from_networkx(nx.path_graph(n))


def path_digraph(n: int) -> SimpleDiGraph:
    return from_networkx(nx.path_graph(n, create_using=nx.DiGraph))


def cycle_graph(n: int) -> SimpleGraph:
    return from_networkx(nx.cycle_graph(n))


def cycle_digraph(n: int) -> SimpleDiGraph:
    return from_networkx(nx.cycle_graph(n, create_using=nx.DiGraph))


def complete_graph(n: int) -> SimpleGraph:
    return from_networkx(nx.complete_graph(n))


def complete_digraph(n: int) -> SimpleDiGraph:
    return from_networkx(nx.complete_graph(n, create_using=nx.DiGraph))


def star_graph(n: int) -> SimpleGraph:
    """Hub 0 joined to ``n - 1`` leaves."""
    return from_networkx(nx.star_graph(n - 1), nv=n) if n > 0 else SimpleGraph(0)
