from __future__ import annotations

from .graph_ops import (
    is_contiguous,
    pack,
    pack_with_mapping,
    to_adjacency_matrix,
    to_adjacency_matrix_string,
    to_line_graph,
)

__all__ = [
    "is_contiguous",
    "pack",
    "pack_with_mapping",
    "to_adjacency_matrix",
    "to_adjacency_matrix_string",
    "to_line_graph",
]
