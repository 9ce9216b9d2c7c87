# -*- coding: utf-8 -*-
# PolyTopo/polymesh/core/graph.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/12/2025

Purpose:
--------
Undirected graph index: assigns stable integer ids to unordered vertex pairs.

Main Tasks:
-----------
   - insert_edge(u, v): idempotent per unordered pair, ids handed out sequentially.
   - get_edge(u, v): lookup without insertion (-1 if absent).
   - edge_vertex0/1(e): endpoints of an edge, smaller vertex id first.

Notes:
------
   - Keys are sorted pairs, so (u, v) and (v, u) name the same edge.
   - Self loops (u == v) are accepted; they only arise from degenerate faces.
"""

import logging
from typing import Dict, List, Tuple

from .errors import IndexRangeError

logger = logging.getLogger(__name__)


def hash_edge(u: int, v: int) -> Tuple[int, int]:
    """Undirected edge key with sorted endpoints."""
    return (u, v) if u < v else (v, u)


class Edges:
    """
    Graph with a fixed vertex set and edges created on demand.
    """

    def __init__(self, n_vertices: int):
        self._n_vertices = int(n_vertices)
        self._index: Dict[Tuple[int, int], int] = {}
        self._ends: List[Tuple[int, int]] = []

    def number_of_vertices(self) -> int:
        return self._n_vertices

    def number_of_edges(self) -> int:
        return len(self._ends)

    def _is_vertex(self, v: int) -> bool:
        return 0 <= v < self._n_vertices

    def insert_edge(self, u: int, v: int) -> int:
        """
        Return the id of edge {u, v}, creating it if needed.

        Raises
        ------
        IndexRangeError
            If an endpoint is outside [0, n_vertices).
        """
        if not (self._is_vertex(u) and self._is_vertex(v)):
            raise IndexRangeError(
                "Edge endpoint out of range.",
                {"u": int(u), "v": int(v), "n_vertices": self._n_vertices},
            )
        key = hash_edge(int(u), int(v))
        eid = self._index.get(key)
        if eid is None:
            eid = len(self._ends)
            self._index[key] = eid
            self._ends.append(key)
        return eid

    def get_edge(self, u: int, v: int) -> int:
        if not (self._is_vertex(u) and self._is_vertex(v)):
            return -1
        return self._index.get(hash_edge(int(u), int(v)), -1)

    def edge_vertex0(self, eid: int) -> int:
        if not 0 <= eid < len(self._ends):
            return -1
        return self._ends[eid][0]

    def edge_vertex1(self, eid: int) -> int:
        if not 0 <= eid < len(self._ends):
            return -1
        return self._ends[eid][1]
