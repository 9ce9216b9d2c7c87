# -*- coding: utf-8 -*-
# PolyTopo/polymesh/tools/utils.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/15/2025

Purpose
-------
Conversions between face lists and the flat, -1 separated corner array.

Main Tasks
----------
    - faces_to_coord_index: [[0,1,2],[0,2,3]] -> [0,1,2,-1,0,2,3,-1].
    - coord_index_to_faces: inverse; a trailing run without -1 is kept as a last face.
    - count_distinct_vertices: number of distinct non-negative indices.
"""

from typing import Iterable, List, Sequence

import numpy as np


def faces_to_coord_index(faces: Iterable[Sequence[int]]) -> np.ndarray:
    """
    Flatten a list of faces into a corner array with a -1 after every face.

    Parameters
    ----------
    faces : iterable of sequences of int
        Vertex ids per face (any face size; a 2D numpy array works too).

    Returns
    -------
    np.ndarray
        (C,) int64 corner array.
    """
    out: List[int] = []
    for face in faces:
        out.extend(int(v) for v in face)
        out.append(-1)
    return np.asarray(out, dtype=np.int64)


def coord_index_to_faces(coord_index: Sequence[int]) -> List[List[int]]:
    """Split a corner array at its -1 separators."""
    faces: List[List[int]] = []
    cur: List[int] = []
    for v in np.asarray(coord_index, dtype=np.int64).tolist():
        if v < 0:
            faces.append(cur)
            cur = []
        else:
            cur.append(v)
    if cur:
        faces.append(cur)
    return faces


def count_distinct_vertices(coord_index: Sequence[int]) -> int:
    ci = np.asarray(coord_index, dtype=np.int64)
    return int(np.unique(ci[ci >= 0]).size)
