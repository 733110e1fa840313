from typing import Optional
from ..iterators import EdgeIterator

from tabulate import tabulate


class EdgeTableExporter:
    def __init__(self, tablefmt: str = "simple"):
        self.tablefmt = tablefmt
        self.headers = ["#", "src", "dst"]

    def __call__(self, edges: EdgeIterator) -> str:
        rows = [(i, e.src, e.dst) for i, e in enumerate(edges)]
        table = tabulate(rows, headers=self.headers, tablefmt=self.tablefmt)
        summary = f"{len(edges)} edges, {edges.graph.nv()} vertices"
        return f"{table}\n\n{summary}" if rows else summary


class TraceExporter:
    """Step-by-step view of a pass: every advance call with the state it returns."""

    def __init__(self, tablefmt: str = "simple", limit: Optional[int] = None):
        self.tablefmt = tablefmt
        self.limit = limit
        self.headers = ["step", "state", "edge", "next"]

    def __call__(self, edges: EdgeIterator) -> str:
        rows = []
        state = edges.start()
        step = 0
        while state is not None and (self.limit is None or step < self.limit):
            edge, following = edges.advance(state)
            rows.append((step, repr(state), repr(edge), repr(following) if following is not None else "done"))
            state = following
            step += 1
        return tabulate(rows, headers=self.headers, tablefmt=self.tablefmt)
