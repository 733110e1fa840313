from typing import Protocol
from ..iterators import EdgeIterator


class ExporterProto(Protocol):
    def __call__(self, edges: EdgeIterator) -> str: ...
