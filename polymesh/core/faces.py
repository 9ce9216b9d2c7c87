# -*- coding: utf-8 -*-
# PolyTopo/polymesh/core/faces.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/12/2025

Purpose:
--------
Decode a flat, sentinel-delimited corner array (the "coordIndex" of an indexed face set)
into contiguous face ranges.

Main Tasks:
-----------
    1) One linear scan: every run of non-negative values closed by a -1 is a face,
       stored as the half-open corner range [start, end). Face id = scan order.
    2) Validate the input:
        - distinct vertex indices must match the declared vertex count,
        - every face has at least 3 corners and is closed by a sentinel.
    3) Answer face/corner queries in O(1) through a per-corner face table.

Notes:
------
- The corner array is copied into a read-only numpy array; callers may reuse their buffer.
- Queries never raise: out-of-range ids return -1.
"""

import logging
from typing import Sequence

import numpy as np

from .errors import VertexCountError, FaceSizeError

logger = logging.getLogger(__name__)

SENTINEL = -1
MIN_FACE_SIZE = 3


class Faces:
    """
    Face ranges over a flat corner array.

    Attributes
    ----------
    face_start : np.ndarray
        (F,) first corner of each face.
    face_end : np.ndarray
        (F,) one past the last corner of each face (the position of its sentinel).
    """

    def __init__(self, n_vertices: int, coord_index: Sequence[int]):
        ci = np.array(coord_index, dtype=np.int64).reshape(-1)
        ci.setflags(write=False)
        self._coord_index = ci
        self._n_vertices = int(n_vertices)

        n_c = int(ci.size)
        valid = ci >= 0

        n_distinct = int(np.unique(ci[valid]).size)
        if n_distinct != self._n_vertices:
            raise VertexCountError(
                "Number of vertices and number of distinct vertex indices must be equal.",
                {"n_vertices": self._n_vertices, "distinct_indices": n_distinct},
            )

        if n_c > 0 and ci[-1] >= 0:
            sep = np.flatnonzero(~valid)
            first = int(sep[-1]) + 1 if sep.size else 0
            raise FaceSizeError(
                "Corner array ends without a closing sentinel.",
                {"first_corner": first, "n_corners": n_c},
            )

        ends = np.flatnonzero(~valid)
        starts = np.concatenate(([0], ends[:-1] + 1)).astype(np.int64) if ends.size else ends.copy()
        sizes = ends - starts

        short = np.flatnonzero(sizes < MIN_FACE_SIZE)
        if short.size:
            f = int(short[0])
            raise FaceSizeError(
                "Every face needs at least {} corners.".format(MIN_FACE_SIZE),
                {"face": f, "size": int(sizes[f]), "first_corner": int(starts[f])},
            )

        self.face_start = starts
        self.face_end = ends
        self.face_start.setflags(write=False)
        self.face_end.setflags(write=False)

        # corner -> face; sentinels stay -1
        face_of = np.full(n_c, -1, dtype=np.int64)
        face_of[valid] = np.repeat(np.arange(ends.size, dtype=np.int64), sizes)
        face_of.setflags(write=False)
        self._corner_face = face_of

        logger.debug("[Faces] %d faces over %d corners (%d vertices)", ends.size, n_c, self._n_vertices)

    # ---- counts ----

    def number_of_vertices(self) -> int:
        return self._n_vertices

    def number_of_faces(self) -> int:
        return int(self.face_end.size)

    def number_of_corners(self) -> int:
        return int(self._coord_index.size)

    @property
    def coord_index(self) -> np.ndarray:
        """Read-only view of the corner array."""
        return self._coord_index

    @property
    def corner_faces(self) -> np.ndarray:
        """Read-only (C,) corner -> face table, -1 at sentinels."""
        return self._corner_face

    # ---- validity helpers ----

    def is_valid_face(self, fid: int) -> bool:
        return 0 <= fid < self.face_end.size

    def is_valid_corner(self, cid: int) -> bool:
        return 0 <= cid < self._coord_index.size

    # ---- face queries ----

    def face_size(self, fid: int) -> int:
        if not self.is_valid_face(fid):
            return -1
        return int(self.face_end[fid] - self.face_start[fid])

    def face_first_corner(self, fid: int) -> int:
        if not self.is_valid_face(fid):
            return -1
        return int(self.face_start[fid])

    def face_corners(self, fid: int) -> range:
        """Corner ids of face fid in cyclic order (empty range for an invalid face)."""
        if not self.is_valid_face(fid):
            return range(0)
        return range(int(self.face_start[fid]), int(self.face_end[fid]))

    def face_vertex(self, fid: int, cid: int) -> int:
        """Vertex stored at corner cid if cid belongs to face fid, else -1."""
        if not self.is_valid_face(fid) or not self.is_valid_corner(cid):
            return -1
        if self.face_start[fid] <= cid < self.face_end[fid]:
            return int(self._coord_index[cid])
        return -1

    # ---- corner queries ----

    def corner_face(self, cid: int) -> int:
        if not self.is_valid_corner(cid):
            return -1
        return int(self._corner_face[cid])

    def next_corner(self, cid: int) -> int:
        """
        Next corner in scan order. The last corner of a face continues with the first
        corner of the following face; the last corner of the last face (and any
        sentinel) returns -1.
        """
        fid = self.corner_face(cid)
        if fid < 0:
            return -1
        if cid + 1 < self.face_end[fid]:
            return cid + 1
        if fid + 1 < self.face_end.size:
            return int(self.face_start[fid + 1])
        return -1
