# -*- coding: utf-8 -*-
# PolyTopo/polymesh/core/polygon_mesh.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/14/2025

Purpose:
--------
Classify the edges and vertices of a half-edge mesh as boundary, regular or singular, and
expose mesh-level predicates used by exporters and validators.

Main Tasks:
-----------
    1) Edges: 1 incident half-edge -> boundary, 2 -> regular, >2 -> singular.
    2) Boundary vertices: both endpoints of every boundary edge.
    3) Singular vertices: a transient corner partition joins, across every regular edge,
       the corners that share a vertex. The number of classes left at a vertex is its part
       count; more than one part means the vertex star is not a single disk.
    4) Mesh predicates: is_regular, has_boundary, is_oriented, is_triangle_mesh, and the
       number of connected components.

Notes:
------
- Boundary and singular edges are never joined across: they separate the disks at a vertex.
- Corners are joined according to the relative winding of the two half-edges, so a
  flipped neighbour still joins the right corners (it is reported by `is_oriented`).
- Both partitions are locals of the constructor and are dropped once counts are taken.
"""

import logging
from typing import List, Sequence

import numpy as np

from .halfedges import HalfEdges
from .partition import Partition

logger = logging.getLogger(__name__)


class PolygonMesh(HalfEdges):
    """
    Half-edge mesh plus boundary/regular/singular classification.

    Parameters
    ----------
    n_vertices : int
        Number of vertices; must equal the number of distinct indices in `coord_index`.
    coord_index : sequence of int
        Flat corner array, faces closed by -1.
    twin_policy : {"regular", "scan"}
        See `HalfEdges`.
    """

    def __init__(self, n_vertices: int, coord_index: Sequence[int], *, twin_policy: str = "regular"):
        super().__init__(n_vertices, coord_index, twin_policy=twin_policy)

        n_v = self.number_of_vertices()
        n_c = self.number_of_corners()
        ci = self._coord_index
        he = self.half_edges()

        n_edge_he = np.diff(self._first_corner_edge)
        n_edge_he.setflags(write=False)
        self._n_edge_he = n_edge_he

        # 1) boundary vertices
        is_bnd = np.zeros(n_v, dtype=bool)
        bnd_he = he[n_edge_he[self._corner_edge[he]] == 1]
        is_bnd[ci[bnd_he]] = True
        is_bnd[self._dst[bnd_he]] = True
        is_bnd.setflags(write=False)
        self._is_boundary_vertex = is_bnd

        # winding of regular edges
        regular = np.flatnonzero(n_edge_he == 2)
        c0 = self._edge_corners[self._first_corner_edge[regular]]
        c1 = self._edge_corners[self._first_corner_edge[regular] + 1]
        consistent = (ci[c0] == self._dst[c1]) & (self._dst[c0] == ci[c1])
        self._flipped_edges = regular[~consistent]

        # 2) corners around each vertex, joined across regular edges
        partition = Partition(n_c)
        nxt = self._next
        for a, b, ok in zip(c0.tolist(), c1.tolist(), consistent.tolist()):
            if ok:
                partition.join(a, nxt[b])
                partition.join(nxt[a], b)
            else:
                partition.join(a, b)
                partition.join(nxt[a], nxt[b])

        # 3) distinct classes per vertex
        reps = np.array([partition.find(c) for c in he.tolist()], dtype=np.int64)
        keys = np.unique(ci[he] * max(n_c, 1) + reps)
        n_parts = np.bincount(keys // max(n_c, 1), minlength=n_v).astype(np.int64)
        n_parts.setflags(write=False)
        self._n_parts_vertex = n_parts

        # 4) connected components: faces joined across shared edges
        n_f = self.number_of_faces()
        faces = Partition(n_f)
        face = self._face
        for eid in np.flatnonzero(n_edge_he > 1).tolist():
            corners = self.edge_half_edges(eid)
            for cid in corners[1:]:
                faces.join(face[corners[0]], face[cid])
        self._n_components = faces.number_of_parts()

        self._n_singular_edges = int(np.count_nonzero(n_edge_he > 2))
        self._n_boundary_edges = int(np.count_nonzero(n_edge_he == 1))
        self._n_singular_vertices = int(np.count_nonzero(n_parts > 1))

        logger.debug(
            "[PolygonMesh] boundary_edges=%d singular_edges=%d singular_vertices=%d components=%d",
            self._n_boundary_edges, self._n_singular_edges, self._n_singular_vertices, self._n_components,
        )

    # ---- edge faces ----

    def number_of_edge_faces(self, eid: int) -> int:
        return self.number_of_edge_half_edges(eid)

    def get_edge_face(self, eid: int, j: int) -> int:
        return self.get_face(self.get_edge_half_edge(eid, j))

    def is_edge_face(self, eid: int, fid: int) -> bool:
        return any(self._face[cid] == fid for cid in self.edge_half_edges(eid))

    # ---- edge classification ----

    def is_boundary_edge(self, eid: int) -> bool:
        return self.number_of_edge_half_edges(eid) == 1

    def is_regular_edge(self, eid: int) -> bool:
        return self.number_of_edge_half_edges(eid) == 2

    def is_singular_edge(self, eid: int) -> bool:
        return self.number_of_edge_half_edges(eid) > 2

    def boundary_edges(self) -> np.ndarray:
        return np.flatnonzero(self._n_edge_he == 1)

    def regular_edges(self) -> np.ndarray:
        return np.flatnonzero(self._n_edge_he == 2)

    def singular_edges(self) -> np.ndarray:
        return np.flatnonzero(self._n_edge_he > 2)

    def inconsistently_oriented_edges(self) -> np.ndarray:
        """Regular edges whose two half-edges run in the same direction."""
        return self._flipped_edges.copy()

    def degenerate_half_edges(self) -> np.ndarray:
        """Half-edges whose source and destination vertex coincide."""
        he = self.half_edges()
        return he[self._coord_index[he] == self._dst[he]]

    # ---- vertex classification ----

    def _is_vertex(self, vid: int) -> bool:
        return 0 <= vid < self.number_of_vertices()

    def is_boundary_vertex(self, vid: int) -> bool:
        return self._is_vertex(vid) and bool(self._is_boundary_vertex[vid])

    def number_of_vertex_parts(self, vid: int) -> int:
        if not self._is_vertex(vid):
            return 0
        return int(self._n_parts_vertex[vid])

    def is_singular_vertex(self, vid: int) -> bool:
        return self.number_of_vertex_parts(vid) > 1

    def boundary_vertices(self) -> np.ndarray:
        return np.flatnonzero(self._is_boundary_vertex)

    def singular_vertices(self) -> np.ndarray:
        return np.flatnonzero(self._n_parts_vertex > 1)

    def vertex_valence(self) -> np.ndarray:
        """(V,) number of edges incident to each vertex (a self loop counts once)."""
        n_e = self.number_of_edges()
        ends = np.array(
            [(self.edge_vertex0(e), self.edge_vertex1(e)) for e in range(n_e)],
            dtype=np.int64,
        ).reshape(-1, 2)
        val = np.bincount(ends[:, 0], minlength=self.number_of_vertices())
        loops = ends[:, 0] == ends[:, 1]
        val += np.bincount(ends[~loops, 1], minlength=self.number_of_vertices())
        return val

    # ---- mesh predicates ----

    def is_regular(self) -> bool:
        return self._n_singular_edges == 0 and self._n_singular_vertices == 0

    def has_boundary(self) -> bool:
        return self._n_boundary_edges > 0

    def is_oriented(self) -> bool:
        return self._flipped_edges.size == 0

    def is_triangle_mesh(self) -> bool:
        n_f = self.number_of_faces()
        return n_f > 0 and bool(np.all(self._faces.face_end - self._faces.face_start == 3))

    def number_of_connected_components(self) -> int:
        return self._n_components

    def face_sizes(self) -> List[int]:
        return (self._faces.face_end - self._faces.face_start).tolist()
