from __future__ import annotations

from typing import Iterable, Optional, Tuple

import networkx as nx
import numpy as np
import pandas as pd

from .edges import Edge
from .graph_wrapper import GraphWrapper, check_node_ids, make_graph, wrap


def build_graph_from_edges(
    df_edges: pd.DataFrame,
    src_col: str,
    dst_col: str,
    type_col: Optional[str] = None,
    directed: bool = False,
) -> GraphWrapper:
    """Build a graph wrapper from an edge table.

    Rows with a missing endpoint (or missing type, when ``type_col`` is set)
    are dropped; endpoint ids are coerced to int. Duplicate rows collapse
    into one edge.
    """
    missing = [c for c in (src_col, dst_col, type_col) if c is not None and c not in df_edges.columns]
    if missing:
        raise ValueError(f"Нет обязательных колонок: {missing}")

    df = df_edges.copy()
    df[src_col] = pd.to_numeric(df[src_col], errors="coerce")
    df[dst_col] = pd.to_numeric(df[dst_col], errors="coerce")
    subset = [src_col, dst_col] + ([type_col] if type_col is not None else [])
    df = df.dropna(subset=subset)

    ids = df[[src_col, dst_col]].to_numpy(dtype=float)
    if ids.size and (not np.all(np.mod(ids, 1) == 0) or np.any(ids < 0)):
        raise ValueError("vertex ids must be non-negative integers")

    g = make_graph(directed=directed, typed=type_col is not None)
    srcs = df[src_col].astype("int64").tolist()
    dsts = df[dst_col].astype("int64").tolist()
    types = df[type_col].tolist() if type_col is not None else [None] * len(srcs)
    for u, v, t in zip(srcs, dsts, types):
        g.add(Edge(u, v, directed=directed, edge_type=t))
    return g


def graph_from_edge_list(
    pairs: Iterable[Tuple[int, int]],
    directed: bool = False,
    vertices: Iterable[int] = (),
) -> GraphWrapper:
    """Untyped graph from (src, dst) pairs, plus optional isolated vertices."""
    g = make_graph(directed=directed)
    for v in vertices:
        g.add_vertex(v)
    for u, v in pairs:
        g.add(Edge(int(u), int(v), directed=directed))
    return g


def graph_to_edge_df(g: GraphWrapper) -> pd.DataFrame:
    """Serialize edges to a dataframe with src/dst[/type] columns."""
    rows = []
    for e in g.edges():
        row = {"src": int(e.src), "dst": int(e.dst)}
        if e.edge_type is not None:
            row["type"] = e.edge_type
        rows.append(row)
    cols = ["src", "dst"] + (["type"] if getattr(g, "typed", False) else [])
    return pd.DataFrame(rows, columns=cols)


def from_networkx(G: nx.Graph) -> GraphWrapper:
    """Wrap ``G`` without copying after checking its node ids.

    Use nx.convert_node_labels_to_integers first for graphs labelled with
    anything other than non-negative ints.
    """
    check_node_ids(G)
    return wrap(G)
