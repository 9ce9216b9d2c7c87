# -*- coding: utf-8 -*-
# PolyTopo/polymesh/stats/report.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/16/2025

Purpose:
--------
Compute a compact topology summary of a mesh and return a structured dictionary ready
for export (CSV/JSON/Excel) or downstream checks. The summary aggregates the inventory
and classification tallies, the vertex valence and face size distributions, and
compares key counts to thresholds.

Main Tasks:
-----------
    1) Resolve the input (path, MeshData, (n_vertices, coord_index) pair, or PolygonMesh).
    2) Build the classified `PolygonMesh` (unless one was passed in).
    3) Compute inventory, valence and face sizes.
    4) Evaluate threshold violations and set an overall "ok" flag.

Notes:
------
    - Thresholds are user-tunable via `thresholds` (merged over defaults).
    - A threshold set to None is not checked.
    - The `flags.violations` section contains per-metric pass/fail info with observed values.
"""

import logging
from typing import Any, Dict, Optional

from polymesh.core.polygon_mesh import PolygonMesh
from .data.reader import ensure_mesh_data
from .data.topology import inventory, valence, face_sizes

logger = logging.getLogger(__name__)

# ----------------------------
# Default thresholds
# ----------------------------
DEFAULT_THRESHOLDS: Dict[str, Optional[int]] = {
    "max_singular_edges": 0,      # non-manifold edges allowed
    "max_singular_vertices": 0,   # non-manifold vertices allowed
    "max_flipped_edges": 0,       # inconsistently wound regular edges allowed
    "max_boundary_edges": None,   # open meshes are fine by default
    "max_components": None,       # any number of shells
}

# threshold key -> inventory key
_CHECKED = (
    ("max_singular_edges", "nE_singular"),
    ("max_singular_vertices", "nV_singular"),
    ("max_flipped_edges", "nE_flipped"),
    ("max_boundary_edges", "nE_boundary"),
    ("max_components", "components"),
)


def _as_polygon_mesh(source, twin_policy: Optional[str]) -> PolygonMesh:
    if isinstance(source, PolygonMesh):
        return source
    data = ensure_mesh_data(source)
    return PolygonMesh(data.n_vertices, data.coord_index, twin_policy=twin_policy or "regular")


def summarize(
    source: Any,
    thresholds: Optional[Dict[str, Optional[int]]] = None,
    twin_policy: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a topology summary and threshold evaluation.

    Parameters
    ----------
    source : str | MeshData | (int, sequence) | PolygonMesh
        Mesh to summarize.
    thresholds : dict, optional
        Dict overriding/adding limits (merged over `DEFAULT_THRESHOLDS`).
    twin_policy : {"regular", "scan"}, optional
        Passed to the mesh constructor when `source` is not already built.

    Returns
    -------
    dict
        {
          "topology": {...},
          "valence": {...},
          "face_sizes": {...},
          "thresholds": {...},        # the effective limits used
          "flags": {
              "ok": bool,
              "violations": {
                 "<inventory key>": {"value": int, "max_allowed": int, "ok": bool},
                 ...
              }
          }
        }

    Raises
    ------
    TopologyError
        If the mesh cannot be built from `source`.
    """
    thr = dict(DEFAULT_THRESHOLDS)
    if thresholds:
        thr.update(thresholds)

    pm = _as_polygon_mesh(source, twin_policy)

    topo = inventory(pm)
    val = valence(pm)
    fsz = face_sizes(pm)

    flags = {"violations": {}, "ok": True}
    for thr_key, inv_key in _CHECKED:
        limit = thr.get(thr_key)
        if limit is None:
            continue
        bad = topo[inv_key] > limit
        flags["violations"][inv_key] = {
            "value": topo[inv_key],
            "max_allowed": limit,
            "ok": not bad,
        }
        flags["ok"] = flags["ok"] and (not bad)

    logger.debug("[summarize] ok=%s violations=%s", flags["ok"],
                 [k for k, v in flags["violations"].items() if not v["ok"]])

    return {
        "topology": topo,
        "valence": val,
        "face_sizes": fsz,
        "thresholds": thr,
        "flags": flags,
    }
