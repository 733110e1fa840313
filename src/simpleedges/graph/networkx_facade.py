from __future__ import annotations
from pathlib import Path
from typing import Generic, Hashable, Iterator, Optional, TypeVar
import logging
import networkx as nx

from .adjacency import SimpleDiGraph, SimpleGraph
from .interfaces import SimpleGraphProto
from ..iterators.edge_iter import EdgeIterator

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


class GraphX(Generic[N]):
    """
    Exposes a networkx graph through integer vertex ids.

    Node labels are numbered in insertion order. Forward adjacency is
    cached and rebuilt after mutations made through this facade; mutate
    the wrapped graph directly and you must call ``refresh()``.
    """

    def __init__(self, graph: Optional[nx.Graph] = None, directed: bool = False):
        if graph is None:
            graph = nx.DiGraph() if directed else nx.Graph()
        self._graph: nx.Graph = graph
        self._labels: list[N] = []
        self._ids: dict[N, int] = {}
        self._fadj: Optional[list[list[int]]] = None

    @property
    def nx_graph(self) -> nx.Graph:
        return self._graph

    def refresh(self) -> None:
        self._fadj = None

    def _build(self) -> list[list[int]]:
        if self._fadj is None:
            self._labels = list(self._graph.nodes)
            self._ids = {node: i for i, node in enumerate(self._labels)}
            self._fadj = [
                sorted(self._ids[w] for w in self._graph.adj[node])
                for node in self._labels
            ]
            logger.debug("indexed %d nodes of %r", len(self._labels), self)
        return self._fadj

    # ------ graph capabilities ------
    def nv(self) -> int:
        return self._graph.number_of_nodes()

    def ne(self) -> int:
        return self._graph.number_of_edges()

    def _check(self, v: int) -> None:
        n = len(self._build())
        if not 0 <= v < n:
            raise IndexError(f"vertex {v} out of range 0..{n - 1}")

    def fadj(self, v: int) -> list[int]:
        self._check(v)
        return self._fadj[v]

    def is_directed(self) -> bool:
        return self._graph.is_directed()

    def has_edge(self, u: int, v: int) -> bool:
        fadj = self._build()
        if not (0 <= u < len(fadj) and 0 <= v < len(fadj)):
            return False
        return self._graph.has_edge(self._labels[u], self._labels[v])

    # ------ labels ------
    def label(self, v: int) -> N:
        self._check(v)
        return self._labels[v]

    def vertex(self, label: N) -> int:
        self._build()
        return self._ids[label]

    def labelled_edges(self) -> Iterator[tuple[N, N]]:
        for e in self.edges():
            yield self._labels[e.src], self._labels[e.dst]

    # ------ mutation ------
    def add_node(self, node: N) -> None:
        self._graph.add_node(node)
        self.refresh()

    def add_edge(self, source: N, target: N) -> None:
        self._graph.add_edge(source, target)
        self.refresh()

    def remove_edge(self, source: N, target: N) -> None:
        self._graph.remove_edge(source, target)
        self.refresh()

    def edges(self) -> EdgeIterator:
        return EdgeIterator(self)

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def __repr__(self) -> str:
        return f"GraphX({self._graph.number_of_nodes()} nodes, {self._graph.number_of_edges()} edges)"


def from_networkx(graph: nx.Graph, nv: int = 0) -> SimpleGraph | SimpleDiGraph:
    """Copy a graph labelled by non-negative ints; ids keep their labels."""
    labels = list(graph.nodes)
    for node in labels:
        if not isinstance(node, int) or node < 0:
            raise ValueError(f"node {node!r} is not a non-negative integer")
    n = max(nv, max(labels, default=-1) + 1)
    g = SimpleDiGraph(n) if graph.is_directed() else SimpleGraph(n)
    for u, v in graph.edges():
        g.add_edge(u, v)
    return g


def to_networkx(graph: SimpleGraphProto) -> nx.Graph:
    out = nx.DiGraph() if graph.is_directed() else nx.Graph()
    out.add_nodes_from(range(graph.nv()))
    out.add_edges_from(tuple(e) for e in EdgeIterator(graph))
    return out


def load_edgelist(path: Path | str, directed: bool = False, nv: int = 0) -> SimpleGraph | SimpleDiGraph:
    """Read ``u v`` lines (``#`` comments allowed) into an adjacency graph."""
    create_using = nx.DiGraph if directed else nx.Graph
    graph = nx.read_edgelist(Path(path), nodetype=int, create_using=create_using, data=False)
    logger.debug("read %d edges from %s", graph.number_of_edges(), path)
    return from_networkx(graph, nv=nv)
