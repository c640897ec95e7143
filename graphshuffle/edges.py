"""Edge values used by the graph wrappers.

Ребро неизменяемо: любые новые концы получаем только через clone/flip.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Hashable, Optional, Tuple


@dataclass(frozen=True, eq=False)
class Edge:
    """Immutable edge between two integer vertices.

    Undirected edges compare equal regardless of orientation, so
    ``Edge(1, 2) == Edge(2, 1)``. Directed edges compare on (src, dst).
    ``edge_type`` takes part in equality for both kinds.
    """

    src: int
    dst: int
    directed: bool = False
    edge_type: Optional[Hashable] = field(default=None)

    @property
    def is_directed(self) -> bool:
        return self.directed

    @property
    def is_typed(self) -> bool:
        return self.edge_type is not None

    def clone(self, src: int, dst: int) -> "Edge":
        """Same kind of edge (directedness, type) with new endpoints."""
        return replace(self, src=int(src), dst=int(dst))

    def flip(self) -> "Edge":
        return replace(self, src=self.dst, dst=self.src)

    def endpoints(self) -> Tuple[int, int]:
        return self.src, self.dst

    def other(self, v: int) -> int:
        if v == self.src:
            return self.dst
        if v == self.dst:
            return self.src
        raise ValueError(f"vertex {v!r} is not an endpoint of {self!r}")

    def is_self_loop(self) -> bool:
        return self.src == self.dst

    def _key(self) -> tuple:
        if self.directed:
            return (True, self.src, self.dst, self.edge_type)
        a, b = (self.src, self.dst) if self.src <= self.dst else (self.dst, self.src)
        return (False, a, b, self.edge_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        arrow = "->" if self.directed else "--"
        if self.edge_type is None:
            return f"Edge({self.src}{arrow}{self.dst})"
        return f"Edge({self.src}{arrow}{self.dst}, type={self.edge_type!r})"


def simple_edge(src: int, dst: int) -> Edge:
    return Edge(int(src), int(dst))


def directed_edge(src: int, dst: int) -> Edge:
    return Edge(int(src), int(dst), directed=True)


def typed_edge(edge_type: Hashable, src: int, dst: int, directed: bool = False) -> Edge:
    if edge_type is None:
        raise ValueError("typed edge needs a non-None edge_type")
    return Edge(int(src), int(dst), directed=directed, edge_type=edge_type)
