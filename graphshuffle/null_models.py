"""Degree-preserving null models via double-edge swaps.

Каждое ребро по очереди пытается обменяться концом "to" со случайным другим
ребром той же области (весь граф или один тип рёбер). Степени вершин при
этом не меняются; обмен отклоняется, если новое ребро уже есть в графе или
получается петля.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Sequence

from networkx.utils import argmap, create_py_random_state

from .adaptors import as_multigraph
from .config import Settings, settings
from .edges import Edge
from .errors import GraphInvariantError
from .graph_wrapper import GraphWrapper, ensure_graph
from .profiling import timeit

logger = logging.getLogger(f"{settings.LOG_NAMESPACE}.null_models")

# неориентированное ребро разворачивается перед обменом с этой вероятностью
FLIP_PROBABILITY = 0.5


def _fresh_random_state(seed):
    """create_py_random_state, except None gives a fresh unseeded generator
    instead of the module-level ``random`` instance."""
    if seed is None:
        return random.Random()
    return create_py_random_state(seed)


def random_state(random_state_argument="seed"):
    """py_random_state counterpart built on _fresh_random_state."""
    return argmap(_fresh_random_state, random_state_argument)


@dataclass
class ShuffleReport:
    """Outcome of one shuffle run.

    ``attempted`` counts every budgeted attempt, including rejected ones;
    ``committed`` is what shuffle_preserve returns.
    """

    shuffles_per_edge: int
    attempted: int = 0
    committed: int = 0
    by_type: Dict[Optional[Hashable], int] = field(default_factory=dict)

    @property
    def acceptance_rate(self) -> float:
        return self.committed / self.attempted if self.attempted else 0.0


def _check_shuffles(shuffles_per_edge: int) -> int:
    if isinstance(shuffles_per_edge, bool) or int(shuffles_per_edge) != shuffles_per_edge:
        raise ValueError(f"shuffles_per_edge must be an integer, got {shuffles_per_edge!r}")
    if shuffles_per_edge < 1:
        raise ValueError("must shuffle at least once")
    return int(shuffles_per_edge)


def _shuffle_scope(
    g: GraphWrapper,
    edges: Sequence[Edge],
    shuffles_per_edge: int,
    rng: random.Random,
) -> int:
    """Swap endpoints among ``edges``, checking membership against ``g``.

    ``edges`` is copied into a list once; positions are overwritten as swaps
    commit so later draws never see a removed edge.
    """
    edge_list: List[Edge] = list(edges)
    n = len(edge_list)
    if n < 2:
        return 0

    orig_size = g.size()
    total = 0

    for i in range(n):
        for _ in range(shuffles_per_edge):
            # j != i без повторных попыток: тянем из n-1 и сдвигаем через i
            j = rng.randrange(n - 1)
            if j >= i:
                j += 1

            e1 = edge_list[i]
            e2 = edge_list[j]

            # ориентация неориентированного ребра в хранилище произвольна
            if not e1.directed and rng.random() < FLIP_PROBABILITY:
                e1 = e1.flip()
            if not e2.directed and rng.random() < FLIP_PROBABILITY:
                e2 = e2.flip()

            swapped1 = e1.clone(e1.src, e2.dst)
            swapped2 = e2.clone(e2.src, e1.dst)

            if g.contains(swapped1) or g.contains(swapped2):
                continue
            if swapped1.is_self_loop() or swapped2.is_self_loop():
                continue

            removed = g.remove(edge_list[i]) and g.remove(edge_list[j])
            added = g.add(swapped1) and g.add(swapped2)
            if not (removed and added):
                raise GraphInvariantError(
                    f"swap of {edge_list[i]!r}/{edge_list[j]!r} -> "
                    f"{swapped1!r}/{swapped2!r} was not edge-count neutral"
                )

            edge_list[i] = swapped1
            edge_list[j] = swapped2
            total += 1

    if g.size() != orig_size:
        raise GraphInvariantError(f"edge count changed from {orig_size} to {g.size()}")
    return total


def _run(g, shuffles_per_edge: int, rng: random.Random, preserve_type: bool) -> ShuffleReport:
    g = ensure_graph(g)
    shuffles_per_edge = _check_shuffles(shuffles_per_edge)
    report = ShuffleReport(shuffles_per_edge=shuffles_per_edge)

    if not preserve_type:
        edges = g.edges()
        report.committed = _shuffle_scope(g, edges, shuffles_per_edge, rng)
        report.attempted = shuffles_per_edge * len(edges) if len(edges) >= 2 else 0
        report.by_type[None] = report.committed
        return report

    m = as_multigraph(g)
    order, size = m.order(), m.size()

    # snapshot: shuffling a type removes and re-adds its edges
    types = sorted(m.edge_types(), key=repr)
    for edge_type in types:
        edges = m.edges(edge_type)
        shuffles = _shuffle_scope(m, edges, shuffles_per_edge, rng)
        report.by_type[edge_type] = shuffles
        report.committed += shuffles
        if len(edges) >= 2:
            report.attempted += shuffles_per_edge * len(edges)
        logger.debug("Made %d shuffles for %d edges of type %s", shuffles, len(edges), edge_type)

    if m.order() != order:
        raise GraphInvariantError(f"changed the number of vertices: {order} -> {m.order()}")
    if m.size() != size:
        raise GraphInvariantError(f"changed the number of edges: {size} -> {m.size()}")
    return report


@timeit("shuffle_preserve")
@random_state("seed")
def shuffle_preserve(g, shuffles_per_edge: int, seed=None) -> int:
    """Shuffle the edges of ``g`` in place, preserving its degree sequence.

    Each edge gets ``shuffles_per_edge`` attempts to exchange its ``dst``
    endpoint with another randomly chosen edge. An attempt fails when either
    new edge already exists or would be a self-loop; failed attempts are not
    retried.

    Args:
        g: graph wrapper (or bare NetworkX graph) to mutate.
        shuffles_per_edge: attempts per edge, >= 1.
        seed: None (a fresh unseeded generator), an int, or a
            ``random.Random``; pass an int or an instance for a
            reproducible run.

    Returns:
        The number of committed swaps, at most ``shuffles_per_edge * g.size()``;
        much lower for dense graphs.

    Raises:
        TypeError: ``g`` is None.
        ValueError: ``shuffles_per_edge`` is not a positive integer.
    """
    return _run(g, shuffles_per_edge, seed, preserve_type=False).committed


@timeit("shuffle_preserve_type")
@random_state("seed")
def shuffle_preserve_type(g, shuffles_per_edge: int, seed=None) -> int:
    """Like shuffle_preserve, but edges only swap with edges of the same type.

    The per-vertex count of edges of each type is therefore preserved, not
    just the total degree. A graph without native edge types is viewed
    through as_multigraph (all untyped edges form one partition).
    """
    report = _run(g, shuffles_per_edge, seed, preserve_type=True)
    logger.info(
        "shuffle_preserve_type: %d/%d swaps committed over %d types",
        report.committed, report.attempted, len(report.by_type),
    )
    return report.committed


@random_state("seed")
def shuffle_report(
    g,
    shuffles_per_edge: Optional[int] = None,
    seed=None,
    preserve_type: bool = False,
    cfg: Settings = settings,
) -> ShuffleReport:
    """Shuffle in place and return the full ShuffleReport.

    ``shuffles_per_edge`` defaults to ``cfg.DEFAULT_SHUFFLES_PER_EDGE``.
    """
    if shuffles_per_edge is None:
        shuffles_per_edge = cfg.DEFAULT_SHUFFLES_PER_EDGE
    return _run(g, shuffles_per_edge, seed, preserve_type=preserve_type)


@random_state("seed")
def shuffled_copy(
    g,
    shuffles_per_edge: Optional[int] = None,
    seed=None,
    preserve_type: bool = False,
    cfg: Settings = settings,
) -> GraphWrapper:
    """Degree-preserving randomized copy; ``g`` itself is left untouched."""
    if shuffles_per_edge is None:
        shuffles_per_edge = cfg.DEFAULT_SHUFFLES_PER_EDGE
    g = ensure_graph(g)
    _check_shuffles(shuffles_per_edge)
    H = g.copy()
    _run(H, shuffles_per_edge, seed, preserve_type=preserve_type)
    return H
