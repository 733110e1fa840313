from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class SimpleGraphProto(Protocol):
    """Capabilities an edge iterator needs from a graph.

    Vertices are the contiguous ids ``0..nv()-1`` and ``fadj(v)`` is an
    ascending, duplicate-free sequence. For undirected graphs adjacency is
    symmetric.
    """
    def nv(self) -> int:...
    def ne(self) -> int:...
    def fadj(self, v: int) -> Sequence[int]:...
    def is_directed(self) -> bool:...
    def has_edge(self, u: int, v: int) -> bool:...


class MutableGraphProto(SimpleGraphProto, Protocol):
    def add_vertex(self) -> bool:...
    def add_edge(self, u: int, v: int) -> bool:...
    def rem_edge(self, u: int, v: int) -> bool:...
