"""Regression tests for the degree-preserving shuffles."""

import random

import networkx as nx
import numpy as np
import pytest

from graphshuffle import (
    DirectedMultigraph,
    Edge,
    GraphInvariantError,
    GraphWrapper,
    Multigraph,
    shuffle_preserve,
    shuffle_preserve_type,
    shuffle_report,
    shuffled_copy,
    wrap,
)
from graphshuffle.graph_build import graph_from_edge_list
from graphshuffle.utils import (
    degree_sequence,
    has_self_loops,
    in_out_degree_sequence,
    typed_degree_sequence,
    typed_vertex_degrees,
    vertex_degrees,
)


def _gnm(n: int = 30, m: int = 60, seed: int = 1, directed: bool = False):
    return wrap(nx.gnm_random_graph(n, m, seed=seed, directed=directed))


def _typed(directed: bool = False, seed: int = 0):
    rng = random.Random(seed)
    g = DirectedMultigraph() if directed else Multigraph()
    for t in ("A", "B"):
        H = nx.gnm_random_graph(20, 40, seed=rng.randrange(10_000), directed=directed)
        for u, v in H.edges():
            g.add(Edge(u, v, directed=directed, edge_type=t))
    return g


def test_undirected_degrees_preserved() -> None:
    """Степени всех вершин совпадают до и после перемешивания."""
    g = _gnm()
    before = vertex_degrees(g)
    edges_before = set(g.edges())

    swaps = shuffle_preserve(g, 5, seed=random.Random(7))

    assert 0 < swaps <= 5 * 60
    assert vertex_degrees(g) == before
    assert np.array_equal(degree_sequence(g), np.sort(list(before.values())))
    assert g.order() == 30
    assert g.size() == 60
    assert set(g.edges()) != edges_before


def test_directed_in_out_degrees_preserved() -> None:
    g = _gnm(directed=True, seed=3)
    before = vertex_degrees(g)
    seq_before = in_out_degree_sequence(g)

    swaps = shuffle_preserve(g, 4, seed=11)

    assert swaps > 0
    assert vertex_degrees(g) == before
    assert in_out_degree_sequence(g) == seq_before
    assert g.size() == 60


def test_no_self_loops_or_duplicates() -> None:
    g = _gnm(n=12, m=30, seed=5)
    shuffle_preserve(g, 10, seed=2)

    edges = g.edges()
    assert not has_self_loops(g)
    assert len(set(edges)) == len(edges) == 30


def test_trivial_scope_is_noop() -> None:
    """Меньше двух рёбер: ничего не делаем и возвращаем 0."""
    g = graph_from_edge_list([(0, 1)], vertices=[2, 3])
    edges_before = g.edges()

    assert shuffle_preserve(g, 3, seed=1) == 0
    assert g.edges() == edges_before
    assert g.vertices() == [2, 3, 0, 1]

    assert shuffle_preserve(GraphWrapper(), 1, seed=1) == 0


@pytest.mark.parametrize("bad", [0, -1])
def test_non_positive_shuffles_rejected(bad) -> None:
    g = _gnm()
    edges_before = set(g.edges())
    with pytest.raises(ValueError):
        shuffle_preserve(g, bad)
    with pytest.raises(ValueError):
        shuffle_preserve_type(g, bad)
    assert set(g.edges()) == edges_before


def test_none_graph_rejected() -> None:
    with pytest.raises(TypeError):
        shuffle_preserve(None, 1)
    with pytest.raises(TypeError):
        shuffle_preserve_type(None, 1)


def test_seeded_runs_are_reproducible() -> None:
    a = _gnm(seed=9)
    b = _gnm(seed=9)
    assert shuffle_preserve(a, 3, seed=123) == shuffle_preserve(b, 3, seed=123)
    assert set(a.edges()) == set(b.edges())


def test_typed_shuffle_preserves_per_type_degrees() -> None:
    """Степени по каждому типу рёбер сохраняются, а не только суммарные."""
    g = _typed()
    order, size = g.order(), g.size()
    per_type = typed_vertex_degrees(g)
    counts = {t: len(g.edges(t)) for t in g.edge_types()}

    swaps = shuffle_preserve_type(g, 5, seed=random.Random(4))

    assert swaps > 0
    assert typed_vertex_degrees(g) == per_type
    assert {t: len(g.edges(t)) for t in g.edge_types()} == counts
    assert (g.order(), g.size()) == (order, size)


def test_typed_shuffle_directed_multigraph() -> None:
    g = _typed(directed=True, seed=8)
    before = vertex_degrees(g)
    per_type = typed_vertex_degrees(g)

    shuffle_preserve_type(g, 3, seed=5)

    assert vertex_degrees(g) == before
    assert typed_vertex_degrees(g) == per_type
    assert all(e.directed for e in g.edges())


def test_typed_shuffle_on_untyped_graph() -> None:
    """Граф без типов рёбер перемешивается как один общий тип."""
    g = _gnm(seed=12)
    before = vertex_degrees(g)
    assert shuffle_preserve_type(g, 2, seed=1) > 0
    assert vertex_degrees(g) == before


def test_plain_shuffle_on_multigraph_keeps_aggregate_degree() -> None:
    g = _typed(seed=2)
    before = vertex_degrees(g)
    types_before = sorted(e.edge_type for e in g.edges())

    shuffle_preserve(g, 3, seed=6)

    assert vertex_degrees(g) == before
    assert sorted(e.edge_type for e in g.edges()) == types_before


def test_shuffle_report_counts() -> None:
    g = _gnm(seed=21)
    report = shuffle_report(g, 2, seed=3)

    assert report.attempted == 2 * 60
    assert 0 < report.committed <= report.attempted
    assert 0.0 < report.acceptance_rate <= 1.0
    assert report.by_type == {None: report.committed}


def test_shuffled_copy_leaves_input_untouched() -> None:
    g = _gnm(seed=4)
    edges_before = set(g.edges())

    H = shuffled_copy(g, 3, seed=10)

    assert set(g.edges()) == edges_before
    assert H is not g
    assert vertex_degrees(H) == vertex_degrees(g)
    assert set(H.edges()) != edges_before


class _LossyGraph(GraphWrapper):
    """Graph whose add() silently drops edges."""

    def add(self, e):
        return False


def test_invariant_violation_is_raised() -> None:
    """Если граф теряет рёбра при вставке, это фатальная ошибка, а не тихий пропуск."""
    base = nx.Graph([(0, 1), (2, 3)])
    g = _LossyGraph(base)
    with pytest.raises(GraphInvariantError):
        shuffle_preserve(g, 1, seed=0)


def test_rejected_attempts_use_up_budget() -> None:
    """В полном графе любой обмен даёт дубликат или петлю: ничего не меняется."""
    g = wrap(nx.complete_graph(5))
    edges_before = g.edges()

    report = shuffle_report(g, 3, seed=1)

    assert report.committed == 0
    assert report.attempted == 3 * 10
    assert g.edges() == edges_before


def test_two_edge_scope_always_pairs_the_other_edge() -> None:
    """Два непересекающихся ребра: каждая попытка обменивает их друг с другом.

    Обмен концами двух рёбер на четырёх вершинах всегда допустим, поэтому
    любое отклонение означало бы, что ребро выбрало само себя.
    """
    g = graph_from_edge_list([(0, 1), (2, 3)])

    assert shuffle_preserve(g, 20, seed=4) == 2 * 20
    assert vertex_degrees(g) == {0: 1, 1: 1, 2: 1, 3: 1}
    assert not has_self_loops(g)


def test_unseeded_runs_ignore_module_random_state() -> None:
    """seed=None не зависит от random.seed() в остальной программе."""
    results = []
    for _ in range(2):
        random.seed(0)
        g = _gnm(seed=14)
        shuffle_preserve(g, 5)
        results.append(frozenset(g.edges()))
    assert results[0] != results[1]


def test_typed_degree_sequence_per_type() -> None:
    g = _typed(seed=3)
    seq_a = typed_degree_sequence(g, "A")
    seq_b = typed_degree_sequence(g, "B")

    shuffle_preserve_type(g, 4, seed=9)

    assert np.array_equal(typed_degree_sequence(g, "A"), seq_a)
    assert np.array_equal(typed_degree_sequence(g, "B"), seq_b)
    assert seq_a.sum() == 2 * len(g.edges("A"))
    assert all(e.is_typed for e in g.edges())
