from __future__ import annotations
from bisect import bisect_left, insort
from typing import Iterable
import logging

from ..iterators.edge_iter import EdgeIterator

logger = logging.getLogger(__name__)


def _contains(adj: list[int], v: int) -> bool:
    i = bisect_left(adj, v)
    return i < len(adj) and adj[i] == v


def _discard(adj: list[int], v: int) -> bool:
    i = bisect_left(adj, v)
    if i < len(adj) and adj[i] == v:
        del adj[i]
        return True
    return False


class _AdjacencyGraph:
    """Shared storage: one sorted neighbor list per vertex."""

    def __init__(self, n: int = 0):
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self._fadj: list[list[int]] = [[] for _ in range(n)]
        self._ne = 0

    def nv(self) -> int:
        return len(self._fadj)

    def ne(self) -> int:
        return self._ne

    def vertices(self) -> range:
        return range(len(self._fadj))

    def has_vertex(self, v: int) -> bool:
        return 0 <= v < len(self._fadj)

    def fadj(self, v: int) -> list[int]:
        if not self.has_vertex(v):
            raise IndexError(f"vertex {v} out of range 0..{self.nv() - 1}")
        return self._fadj[v]

    def outneighbors(self, v: int) -> list[int]:
        return self.fadj(v)

    def has_edge(self, u: int, v: int) -> bool:
        if not (self.has_vertex(u) and self.has_vertex(v)):
            return False
        return _contains(self._fadj[u], v)

    def add_vertex(self) -> bool:
        self._fadj.append([])
        return True

    def edges(self) -> EdgeIterator:
        return EdgeIterator(self)

    def __len__(self) -> int:
        return self.nv()

    def __contains__(self, v: object) -> bool:
        return isinstance(v, int) and self.has_vertex(v)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.nv()} vertices, {self.ne()} edges)"


class SimpleGraph(_AdjacencyGraph):

    def is_directed(self) -> bool:
        return False

    def neighbors(self, v: int) -> list[int]:
        return self.fadj(v)

    def degree(self, v: int) -> int:
        return len(self.fadj(v))

    def add_edge(self, u: int, v: int) -> bool:
        if not (self.has_vertex(u) and self.has_vertex(v)):
            logger.debug("add_edge(%d, %d): vertex out of range", u, v)
            return False
        if _contains(self._fadj[u], v):
            return False
        insort(self._fadj[u], v)
        if u != v:
            insort(self._fadj[v], u)
        self._ne += 1
        return True

    def rem_edge(self, u: int, v: int) -> bool:
        if not (self.has_vertex(u) and self.has_vertex(v)):
            return False
        if not _discard(self._fadj[u], v):
            logger.debug("rem_edge(%d, %d): no such edge", u, v)
            return False
        if u != v:
            _discard(self._fadj[v], u)
        self._ne -= 1
        return True


class SimpleDiGraph(_AdjacencyGraph):

    def __init__(self, n: int = 0):
        super().__init__(n)
        self._badj: list[list[int]] = [[] for _ in range(n)]

    def is_directed(self) -> bool:
        return True

    def badj(self, v: int) -> list[int]:
        if not self.has_vertex(v):
            raise IndexError(f"vertex {v} out of range 0..{self.nv() - 1}")
        return self._badj[v]

    def inneighbors(self, v: int) -> list[int]:
        return self.badj(v)

    def indegree(self, v: int) -> int:
        return len(self.badj(v))

    def outdegree(self, v: int) -> int:
        return len(self.fadj(v))

    def add_vertex(self) -> bool:
        self._badj.append([])
        return super().add_vertex()

    def add_edge(self, u: int, v: int) -> bool:
        if not (self.has_vertex(u) and self.has_vertex(v)):
            logger.debug("add_edge(%d, %d): vertex out of range", u, v)
            return False
        if _contains(self._fadj[u], v):
            return False
        insort(self._fadj[u], v)
        insort(self._badj[v], u)
        self._ne += 1
        return True

    def rem_edge(self, u: int, v: int) -> bool:
        if not (self.has_vertex(u) and self.has_vertex(v)):
            return False
        if not _discard(self._fadj[u], v):
            logger.debug("rem_edge(%d, %d): no such edge", u, v)
            return False
        _discard(self._badj[v], u)
        self._ne -= 1
        return True


def add_edges(graph, pairs: Iterable[tuple[int, int]]) -> int:
    """Add every pair to ``graph``; returns how many were new."""
    return sum(1 for u, v in pairs if graph.add_edge(u, v))
