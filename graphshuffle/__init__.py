"""Graph transforms over integer-vertex graphs backed by NetworkX.

Degree-preserving edge shuffles (plain and per edge type), vertex-id
compaction, line graphs and adjacency dumps.
"""

from __future__ import annotations

from .adaptors import (
    as_directed_graph,
    as_multigraph,
    synchronized_graph,
    unmodifiable,
)
from .config import Settings, settings
from .core.graph_ops import (
    is_contiguous,
    pack,
    pack_with_mapping,
    to_adjacency_matrix,
    to_adjacency_matrix_string,
    to_line_graph,
)
from .edges import Edge, directed_edge, simple_edge, typed_edge
from .errors import GraphInvariantError
from .graph_wrapper import (
    DirectedGraph,
    DirectedMultigraph,
    GraphWrapper,
    Multigraph,
    make_graph,
    wrap,
)
from .indexer import HashIndexer
from .null_models import (
    ShuffleReport,
    shuffle_preserve,
    shuffle_preserve_type,
    shuffle_report,
    shuffled_copy,
)

__all__ = [
    "DirectedGraph",
    "DirectedMultigraph",
    "Edge",
    "GraphInvariantError",
    "GraphWrapper",
    "HashIndexer",
    "Multigraph",
    "Settings",
    "ShuffleReport",
    "as_directed_graph",
    "as_multigraph",
    "directed_edge",
    "is_contiguous",
    "make_graph",
    "pack",
    "pack_with_mapping",
    "settings",
    "shuffle_preserve",
    "shuffle_preserve_type",
    "shuffle_report",
    "shuffled_copy",
    "simple_edge",
    "synchronized_graph",
    "to_adjacency_matrix",
    "to_adjacency_matrix_string",
    "to_line_graph",
    "typed_edge",
    "unmodifiable",
    "wrap",
]
