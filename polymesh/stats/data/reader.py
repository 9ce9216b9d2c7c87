# -*- coding: utf-8 -*-
# PolyTopo/polymesh/stats/data/reader.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/15/2025

Purpose:
--------
Provide a lightweight `MeshData` container and a `read` function that loads polygon
connectivity from mesh files via `meshio` and flattens it into the -1 separated corner
array the core works on.

Main Tasks:
-----------
    1) Define `MeshData` (points, coord_index, n_vertices, name, vertex_map).
    2) Read mesh file with `meshio.read`.
    3) Flatten every surface cell block (triangle, quad, polygon*) into corners.
    4) Optionally compact: drop unreferenced points and renumber vertices so the
       distinct-index count equals the vertex count.
    5) Build `MeshData` directly from Python face lists (`from_faces`).

Notes:
------
- Line and vertex cells (boundary tags, point sets) are skipped quietly; volume cells
  are skipped with a warning since this package only analyses surfaces.
- `vertex_map[new_id] = original_point_id` when compaction renumbered vertices.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from polymesh.tools.utils import faces_to_coord_index, count_distinct_vertices

logger = logging.getLogger(__name__)

_SURFACE_TYPES = ("triangle", "quad", "quadrilateral", "polygon")
_QUIET_TYPES = ("vertex", "line", "line3")


class MeshData:
    """
    Lightweight container for polygon connectivity.

    Attributes
    ----------
    points : np.ndarray or None
        (N,3) or (N,2) vertex coordinates (not used by the topology itself).
    coord_index : np.ndarray
        (C,) corner array, faces closed by -1.
    n_vertices : int
        Declared vertex count handed to the core.
    name : str
        Mesh name (file stem when read from disk).
    vertex_map : np.ndarray or None
        (n_vertices,) original point id of each vertex after compaction.
    """

    def __init__(
        self,
        points: Optional[np.ndarray],
        coord_index: np.ndarray,
        n_vertices: int,
        name: str = "",
        vertex_map: Optional[np.ndarray] = None,
    ):
        self.points = points
        self.coord_index = coord_index
        self.n_vertices = int(n_vertices)
        self.name = name
        self.vertex_map = vertex_map

    def __repr__(self):
        return "MeshData(name={!r}, n_vertices={}, n_corners={})".format(
            self.name, self.n_vertices, int(self.coord_index.size)
        )


def _is_surface(cell_type: Optional[str]) -> bool:
    return cell_type is not None and (cell_type in _SURFACE_TYPES or cell_type.startswith("polygon"))


def _flatten_block(data) -> List[int]:
    """Corner list of one cell block; handles fixed-size arrays and ragged lists."""
    arr = data if isinstance(data, np.ndarray) else None
    if arr is not None and arr.ndim == 2:
        sep = np.full((arr.shape[0], 1), -1, dtype=np.int64)
        return np.hstack([arr.astype(np.int64), sep]).ravel().tolist()
    out: List[int] = []
    for face in data:
        out.extend(int(v) for v in face)
        out.append(-1)
    return out


def _compact(coord_index: np.ndarray, points: Optional[np.ndarray]) -> Tuple[np.ndarray, Optional[np.ndarray], np.ndarray]:
    """
    Renumber referenced vertices to 0..k-1.

    Returns
    -------
    (coord_index, points, vertex_map)
    """
    valid = coord_index >= 0
    used = np.unique(coord_index[valid])
    size = int(used[-1]) + 1 if used.size else 0
    if points is not None:
        size = max(size, len(points))
    remap = np.full(size, -1, dtype=np.int64)
    remap[used] = np.arange(used.size, dtype=np.int64)
    out = np.full(coord_index.size, -1, dtype=np.int64)
    out[valid] = remap[coord_index[valid]]
    pts = None if points is None else np.asarray(points)[used]
    return out, pts, used


def read(path: str, compact: bool = True) -> MeshData:
    """
    Load a mesh file into a `MeshData` container.

    Parameters
    ----------
    path : str
        Any surface mesh format meshio reads (.obj, .off, .ply, .stl, .vtk, .msh, ...).
    compact : bool, optional
        Drop unreferenced points and renumber (default True).

    Returns
    -------
    MeshData
        Container with corner array and vertex count.
    """
    import meshio

    m = meshio.read(path)
    pts = np.asarray(m.points, dtype=float)

    corners: List[int] = []
    skipped = {}
    for cb in m.cells:
        t = getattr(cb, "type", None)
        if _is_surface(t):
            corners.extend(_flatten_block(cb.data))
        elif t in _QUIET_TYPES:
            continue
        else:
            skipped[t] = skipped.get(t, 0) + len(cb.data)

    if skipped:
        logger.warning("[read] Skipped non-surface cells in %s: %s", path, skipped)

    ci = np.asarray(corners, dtype=np.int64)
    name = Path(path).stem

    if compact:
        ci, pts_c, vmap = _compact(ci, pts)
        data = MeshData(points=pts_c, coord_index=ci, n_vertices=int(vmap.size), name=name, vertex_map=vmap)
    else:
        data = MeshData(points=pts, coord_index=ci, n_vertices=len(pts), name=name)

    logger.info("[read] %s: %d vertices, %d corners", path, data.n_vertices, int(ci.size))
    return data


def from_faces(
    faces: Iterable[Sequence[int]],
    points: Optional[np.ndarray] = None,
    name: str = "",
    compact: bool = False,
) -> MeshData:
    """
    Build `MeshData` from Python face lists.

    Without compaction the vertex count is the number of distinct indices, so the
    faces should reference 0..n-1 without gaps.
    """
    ci = faces_to_coord_index(faces)
    if compact:
        ci, pts, vmap = _compact(ci, points)
        return MeshData(points=pts, coord_index=ci, n_vertices=int(vmap.size), name=name, vertex_map=vmap)
    return MeshData(points=points, coord_index=ci, n_vertices=count_distinct_vertices(ci), name=name)


def ensure_mesh_data(source) -> MeshData:
    """
    Accept `MeshData`, an `(n_vertices, coord_index)` pair, or a filesystem path;
    return `MeshData`.
    """
    if isinstance(source, MeshData):
        return source
    if isinstance(source, (tuple, list)) and len(source) == 2 and not isinstance(source[0], (str, Path)):
        n_vertices, coord_index = source
        return MeshData(points=None, coord_index=np.asarray(coord_index, dtype=np.int64), n_vertices=int(n_vertices))
    return read(str(source))
