# -*- coding: utf-8 -*-
# PolyTopo/polymesh/checks/helpers.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/16/2025

Purpose:
--------
Provide the shared data model (`MeshView`) and the one-time precomputation
(`precompute_cache`) used by all topology checks, so the half-edge structure is built
and classified once per validation pass.

Main Tasks:
-----------
- MeshView: immutable container built from a path, a `MeshData`, or an
  `(n_vertices, coord_index)` pair.
- precompute_cache: build the `PolygonMesh` and the id lists rules report from:
    * mesh:               PolygonMesh (twin policy from thresholds).
    * boundary_edges:     (k,) edge ids with one incident half-edge.
    * singular_edges:     (k,) edge ids with more than two incident half-edges.
    * singular_vertices:  (k,) vertex ids whose star splits into several parts.
    * flipped_edges:      (k,) regular edges with inconsistent winding.
    * degenerate:         (k,) half-edges whose endpoints coincide.
    * non_triangles:      (k,) face ids whose size is not 3.

Notes:
------
- `MeshView` is read-only; checks should not mutate it.
- Construction errors (`TopologyError`) propagate out of `precompute_cache`.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from polymesh.core.polygon_mesh import PolygonMesh
from polymesh.stats.data.reader import ensure_mesh_data


# -------------------------
# Mesh view
# -------------------------
@dataclass(frozen=True)
class MeshView:
    source: str                      # path or mesh name ("" for in-memory arrays)
    n_vertices: int
    coord_index: np.ndarray          # (C,) corners, faces closed by -1
    points: Optional[np.ndarray]     # (N,3) or None


def build_mesh_view(source: Any) -> MeshView:
    """
    Wrap any accepted mesh source into an immutable MeshView.
    """
    data = ensure_mesh_data(source)
    ci = np.array(data.coord_index, dtype=np.int64)
    ci.setflags(write=False)
    label = str(source) if isinstance(source, str) else (data.name or "")
    return MeshView(source=label, n_vertices=int(data.n_vertices), coord_index=ci, points=data.points)


# -------------------------
# Precomputations (cache)
# -------------------------
def precompute_cache(mv: MeshView, th: Dict) -> Dict:
    """
    Build all one-time structures needed by checks.
    """
    pm = PolygonMesh(mv.n_vertices, mv.coord_index, twin_policy=th.get("twin_policy", "regular"))

    cache: Dict[str, Any] = {"mesh": pm}
    cache["boundary_edges"] = pm.boundary_edges()
    cache["singular_edges"] = pm.singular_edges()
    cache["singular_vertices"] = pm.singular_vertices()
    cache["flipped_edges"] = pm.inconsistently_oriented_edges()
    cache["degenerate"] = pm.degenerate_half_edges()

    sizes = np.asarray(pm.face_sizes(), dtype=np.int64)
    cache["non_triangles"] = np.flatnonzero(sizes != 3)
    return cache
