# -*- coding: utf-8 -*-
# PolyTopo/polymesh/core/halfedges.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/13/2025

Purpose:
--------
Half-edge adjacency built directly from a flat corner array. Every non-sentinel corner is
a half-edge running from its own vertex to the vertex of the next corner of the same face
(wrapping to the first corner at the end of the face).

Main Tasks:
-----------
    1) Validate: every corner value lies in [-1, n_vertices).
    2) Register faces (`Faces`) and edges (`Edges`): per corner, owning face, edge id, and
       a tally of half-edges per edge.
    3) Assign twins in scan order (first seen, second seen).
    4) Build the edge -> incident corners table (prefix sums + fill pass).

Inputs/Contracts:
-----------------
- n_vertices : int, number of vertices referenced by the corner array.
- coord_index : sequence of int, faces separated by -1 (each face closed by a -1).
- twin_policy :
    "regular" (default)  only half-edges of regular edges (exactly two incident
                         half-edges) get a twin; every half-edge of a singular edge
                         reports -1.
    "scan"               first-two-wins: on a singular edge the first two half-edges in
                         scan order are twins, the rest report -1.

Notes:
------
- Twins are paired regardless of winding. Use `is_consistently_oriented_edge` to find
  regular edges whose two half-edges run in the same direction.
- Navigation (`get_next`, `get_prev`, `get_dst`) is O(1) through per-corner side tables.
- All queries are total: invalid ids return -1 (or 0 for counts).
"""

import logging
from typing import List, Sequence

import numpy as np

from .errors import IndexRangeError
from .faces import Faces, SENTINEL
from .graph import Edges

logger = logging.getLogger(__name__)

TWIN_POLICIES = ("regular", "scan")


class HalfEdges:
    """
    Half-edge connectivity over a sentinel-delimited corner array.
    """

    def __init__(self, n_vertices: int, coord_index: Sequence[int], *, twin_policy: str = "regular"):
        if twin_policy not in TWIN_POLICIES:
            raise ValueError("twin_policy must be one of {}, got {!r}".format(TWIN_POLICIES, twin_policy))
        self.twin_policy = twin_policy

        n_v = int(n_vertices)
        ci = np.array(coord_index, dtype=np.int64).reshape(-1)

        # 1) value range
        bad = np.flatnonzero((ci < SENTINEL) | (ci >= n_v))
        if bad.size:
            c = int(bad[0])
            raise IndexRangeError(
                "Unexpected corner value {} at position {}.".format(int(ci[c]), c),
                {"corner": c, "value": int(ci[c]), "n_vertices": n_v},
            )

        # 2) faces, side tables, edges
        self._faces = Faces(n_v, ci)
        self._edges = Edges(n_v)
        ci = self._faces.coord_index
        self._coord_index = ci

        n_c = int(ci.size)
        starts = self._faces.face_start
        ends = self._faces.face_end
        valid = ci >= 0

        nxt = np.arange(1, n_c + 1, dtype=np.int64)
        prv = np.arange(-1, n_c - 1, dtype=np.int64)
        if starts.size:
            nxt[ends - 1] = starts
            prv[starts] = ends - 1
        nxt[~valid] = -1
        prv[~valid] = -1

        dst = np.full(n_c, -1, dtype=np.int64)
        dst[valid] = ci[nxt[valid]]

        self._face = self._faces.corner_faces
        self._next = nxt
        self._prev = prv
        self._dst = dst

        half_edges = np.flatnonzero(valid)
        src_l = ci.tolist()
        dst_l = dst.tolist()

        corner_edge = np.full(n_c, -1, dtype=np.int64)
        tally: List[int] = []
        for fid in range(self._faces.number_of_faces()):
            for cid in self._faces.face_corners(fid):
                eid = self._edges.insert_edge(src_l[cid], dst_l[cid])
                corner_edge[cid] = eid
                if eid == len(tally):
                    tally.append(0)
                tally[eid] += 1
        self._corner_edge = corner_edge
        n_e = self._edges.number_of_edges()
        n_edge_he = np.asarray(tally, dtype=np.int64)

        # 3) twins, in the same face order
        twin = np.full(n_c, -1, dtype=np.int64)
        first_seen = np.full(n_e, -1, dtype=np.int64)
        for cid in half_edges.tolist():
            eid = corner_edge[cid]
            if twin_policy == "regular" and n_edge_he[eid] != 2:
                continue
            first = first_seen[eid]
            if first < 0:
                first_seen[eid] = cid
            elif twin[first] < 0:
                twin[cid] = first
                twin[first] = cid
        self._twin = twin

        # 4) edge -> incident corners (array of arrays)
        first_corner_edge = np.zeros(n_e + 1, dtype=np.int64)
        np.cumsum(n_edge_he, out=first_corner_edge[1:])
        edge_corners = np.full(int(half_edges.size), -1, dtype=np.int64)
        cursor = first_corner_edge[:-1].copy()
        for cid in half_edges.tolist():
            eid = corner_edge[cid]
            edge_corners[cursor[eid]] = cid
            cursor[eid] += 1
        self._first_corner_edge = first_corner_edge
        self._edge_corners = edge_corners

        for arr in (self._face, self._next, self._prev, self._dst, self._twin,
                    self._corner_edge, self._first_corner_edge, self._edge_corners):
            arr.setflags(write=False)

        logger.debug(
            "[HalfEdges] nV=%d nE=%d nF=%d nC=%d (twin_policy=%s)",
            n_v, n_e, self._faces.number_of_faces(), n_c, twin_policy,
        )

    # ---- counts ----

    def number_of_vertices(self) -> int:
        return self._edges.number_of_vertices()

    def number_of_edges(self) -> int:
        return self._edges.number_of_edges()

    def number_of_faces(self) -> int:
        return self._faces.number_of_faces()

    def number_of_corners(self) -> int:
        return int(self._coord_index.size)

    def number_of_half_edges(self) -> int:
        return int(self._edge_corners.size)

    @property
    def coord_index(self) -> np.ndarray:
        """Read-only corner array owned by this structure."""
        return self._coord_index

    @property
    def faces(self) -> Faces:
        return self._faces

    def half_edges(self) -> np.ndarray:
        """Corner ids of all half-edges (non-sentinel corners), in scan order."""
        return np.flatnonzero(self._coord_index >= 0)

    def _is_corner(self, cid: int) -> bool:
        return 0 <= cid < self._coord_index.size

    def _is_edge(self, eid: int) -> bool:
        return 0 <= eid < self._edges.number_of_edges()

    # ---- faces ----

    def face_size(self, fid: int) -> int:
        return self._faces.face_size(fid)

    def face_first_corner(self, fid: int) -> int:
        return self._faces.face_first_corner(fid)

    def face_corners(self, fid: int) -> range:
        return self._faces.face_corners(fid)

    # ---- half-edge navigation ----

    def get_face(self, cid: int) -> int:
        if not self._is_corner(cid):
            return -1
        return int(self._face[cid])

    def get_src(self, cid: int) -> int:
        if not self._is_corner(cid):
            return -1
        return int(self._coord_index[cid])

    def get_dst(self, cid: int) -> int:
        if not self._is_corner(cid):
            return -1
        return int(self._dst[cid])

    def get_next(self, cid: int) -> int:
        if not self._is_corner(cid):
            return -1
        return int(self._next[cid])

    def get_prev(self, cid: int) -> int:
        if not self._is_corner(cid):
            return -1
        return int(self._prev[cid])

    def get_twin(self, cid: int) -> int:
        if not self._is_corner(cid):
            return -1
        return int(self._twin[cid])

    def get_corner_edge(self, cid: int) -> int:
        """Edge id of half-edge cid (-1 for sentinels and out-of-range corners)."""
        if not self._is_corner(cid):
            return -1
        return int(self._corner_edge[cid])

    # ---- edges ----

    def get_edge(self, u: int, v: int) -> int:
        return self._edges.get_edge(u, v)

    def edge_vertex0(self, eid: int) -> int:
        return self._edges.edge_vertex0(eid)

    def edge_vertex1(self, eid: int) -> int:
        return self._edges.edge_vertex1(eid)

    def number_of_edge_half_edges(self, eid: int) -> int:
        if not self._is_edge(eid):
            return 0
        return int(self._first_corner_edge[eid + 1] - self._first_corner_edge[eid])

    def get_edge_half_edge(self, eid: int, j: int) -> int:
        if not 0 <= j < self.number_of_edge_half_edges(eid):
            return -1
        return int(self._edge_corners[self._first_corner_edge[eid] + j])

    def edge_half_edges(self, eid: int) -> List[int]:
        """All corners incident to edge eid, in scan order."""
        if not self._is_edge(eid):
            return []
        lo, hi = self._first_corner_edge[eid], self._first_corner_edge[eid + 1]
        return self._edge_corners[lo:hi].tolist()

    def is_consistently_oriented_edge(self, eid: int) -> bool:
        """
        True for a regular edge whose two half-edges run in opposite directions.
        """
        if self.number_of_edge_half_edges(eid) != 2:
            return False
        c0, c1 = self.edge_half_edges(eid)
        return bool(self._coord_index[c0] == self._dst[c1] and self._dst[c0] == self._coord_index[c1])
