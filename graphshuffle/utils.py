"""Degree statistics used to check what the shuffles preserve."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Hashable, List, Optional, Tuple

import numpy as np

from .adaptors import as_directed_graph
from .graph_wrapper import ensure_graph


def vertex_degrees(g) -> Dict[int, object]:
    """{v: degree} for undirected graphs, {v: (in, out)} for directed ones."""
    g = ensure_graph(g)
    if g.directed:
        d = as_directed_graph(g)
        return {v: (d.in_degree(v), d.out_degree(v)) for v in g.vertices()}
    return {v: g.degree(v) for v in g.vertices()}


def degree_sequence(g) -> np.ndarray:
    """Sorted total degrees (in + out for directed graphs)."""
    g = ensure_graph(g)
    degs = np.fromiter((g.degree(v) for v in g.vertices()), dtype=int, count=g.order())
    return np.sort(degs)


def in_out_degree_sequence(g) -> List[Tuple[int, int]]:
    """Sorted (in, out) pairs; undirected edges count on both sides."""
    g = ensure_graph(g)
    d = as_directed_graph(g)
    return sorted((d.in_degree(v), d.out_degree(v)) for v in g.vertices())


def typed_vertex_degrees(g) -> Counter:
    """Counter of (vertex, edge_type) -> incident edges of that type.

    Self-loops count twice at their vertex, as in networkx degree.
    """
    g = ensure_graph(g)
    counts: Counter = Counter()
    for e in g.edges():
        counts[(e.src, e.edge_type)] += 1
        counts[(e.dst, e.edge_type)] += 1
    return counts


def typed_degree_sequence(g, edge_type: Optional[Hashable]) -> np.ndarray:
    counts = typed_vertex_degrees(g)
    return np.sort(np.array([c for (_, t), c in counts.items() if t == edge_type], dtype=int))


def has_self_loops(g) -> bool:
    g = ensure_graph(g)
    return any(e.is_self_loop() for e in g.edges())


def graph_summary(g) -> str:
    """Return a human-readable summary for the graph."""
    g = ensure_graph(g)
    N = g.order()
    E = g.size()
    degs = degree_sequence(g)
    max_deg = int(degs[-1]) if degs.size else 0
    mean_deg = float(degs.mean()) if degs.size else 0.0
    types = len(g.edge_types()) if getattr(g, "typed", False) else 0
    return (
        f"N={N}\n"
        f"E={E}\n"
        f"Directed={bool(g.directed)}\n"
        f"EdgeTypes={types}\n"
        f"MeanDegree={mean_deg:.6g}\n"
        f"MaxDegree={max_deg}\n"
        f"Selfloops={sum(1 for e in g.edges() if e.is_self_loop())}\n"
    )
