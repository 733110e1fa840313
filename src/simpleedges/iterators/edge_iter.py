from __future__ import annotations
from collections.abc import Sequence, Set
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Optional
import logging

from ..model import Edge, EdgeIterState

if TYPE_CHECKING:
    from ..graph.interfaces import SimpleGraphProto

logger = logging.getLogger(__name__)


class EdgeIterator:
    """
    Lazy view over the edges of a graph in lexicographic order, smallest first.

    Undirected edges are yielded once, as ``Edge(u, v)`` with ``u <= v``.
    Each pass is independent; a pass is invalidated by changes to the graph.

    >>> from simpleedges.graph import path_graph
    >>> es = EdgeIterator(path_graph(3))
    >>> es
    EdgeIterator 2
    >>> edge, state = es.advance(es.start())
    >>> edge, state
    (Edge 0 => 1, EdgeIterState [1, 1])
    >>> es.advance(state)
    (Edge 1 => 2, None)
    """

    __slots__ = ("_graph",)

    def __init__(self, graph: SimpleGraphProto):
        self._graph = graph

    @property
    def graph(self) -> SimpleGraphProto:
        return self._graph

    # ------ traversal ------
    def start(self) -> Optional[EdgeIterState]:
        g = self._graph
        # the first vertex with neighbors has none smaller than itself
        for s in range(g.nv()):
            if len(g.fadj(s)) > 0:
                logger.debug("pass starts at vertex %d", s)
                return EdgeIterState(s, 0)
        logger.debug("pass over %r is empty", self)
        return None

    def advance(self, state: Optional[EdgeIterState]) -> tuple[Edge, Optional[EdgeIterState]]:
        if state is None:
            raise ValueError("cannot advance an exhausted edge pass")
        g = self._graph
        directed = g.is_directed()
        s = state.src
        di = state.index
        edge = Edge(s, g.fadj(s)[di])
        di += 1
        nv = g.nv()
        while s < nv:
            sadj = g.fadj(s)
            while di < len(sadj):
                if directed or s <= sadj[di]:
                    return edge, EdgeIterState(s, di)
                di += 1
            s += 1
            di = 0
        logger.debug("pass exhausted after %r", edge)
        return edge, None

    def __iter__(self) -> Iterator[Edge]:
        state = self.start()
        while state is not None:
            edge, state = self.advance(state)
            yield edge

    def __len__(self) -> int:
        return self._graph.ne()

    # ------ membership / equality ------
    def __contains__(self, edge: Any) -> bool:
        pair = _as_pair(edge)
        return pair is not None and self._graph.has_edge(*pair)

    def equals_collection(self, edges: Iterable[Any]) -> bool:
        """Containment plus cardinality; ``edges`` must not hold duplicates."""
        count = 0
        for item in edges:
            pair = _as_pair(item)
            if pair is None or not self._graph.has_edge(*pair):
                logger.debug("%r is not an edge of the graph", item)
                return False
            count += 1
        return count == self._graph.ne()

    def equals_iterator(self, other: EdgeIterator) -> bool:
        g = self._graph
        h = other.graph
        if g.ne() != h.ne():
            return False
        m = min(g.nv(), h.nv())
        for i in range(m):
            if list(g.fadj(i)) != list(h.fadj(i)):
                logger.debug("adjacency of vertex %d differs", i)
                return False
        for longer in (g, h):
            for i in range(m, longer.nv()):
                if len(longer.fadj(i)) > 0:
                    return False
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EdgeIterator):
            return self.equals_iterator(other)
        if isinstance(other, Set) or (
            isinstance(other, Sequence) and not isinstance(other, (str, bytes, bytearray))
        ):
            return self.equals_collection(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"EdgeIterator {self._graph.ne()}"


def _as_pair(item: Any) -> Optional[tuple[int, int]]:
    """``(u, v)`` for an Edge or a pair of ints, None for anything else."""
    if isinstance(item, (str, bytes, bytearray)):
        return None
    try:
        u, v = item
    except (TypeError, ValueError):
        return None
    if not (isinstance(u, int) and isinstance(v, int)):
        return None
    return u, v


def edges(graph: SimpleGraphProto) -> EdgeIterator:
    return EdgeIterator(graph)
