from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, frozen=True, order=True)
class Edge:
    src: int
    dst: int

    def __iter__(self) -> Iterator[int]:
        yield self.src
        yield self.dst

    def reverse(self) -> Edge:
        return Edge(self.dst, self.src)

    def __repr__(self) -> str:
        return f"Edge {self.src} => {self.dst}"


@dataclass(slots=True, frozen=True)
class EdgeIterState:
    """Position of a pass: source vertex and index into its forward adjacency."""
    src: int
    index: int

    def __repr__(self) -> str:
        return f"EdgeIterState [{self.src}, {self.index}]"
