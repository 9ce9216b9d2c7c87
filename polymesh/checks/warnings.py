# -*- coding: utf-8 -*-
# PolyTopo/polymesh/checks/warnings.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/16/2025

Purpose:
--------
WARN-tier topology rules. These are advisory: an open, mixed-polygon or multi-shell mesh
is still a valid polygon mesh, but exporters and solvers often expect otherwise.

Finding Schema:
---------------
Same as `errors.py`, with "severity": "warn".

Notes:
------
- `max_boundary_edges` / `max_components` thresholds turn the count into a pass/fail;
  when unset, any boundary edge (or more than one component) is reported.
"""

from typing import Dict, List


# ---- Shared finding builder ----
def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict,
             fixable: bool = True, limit: int = 25):
    return {
        "id": rule_id,
        "severity": "warn",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:limit],
        "details": details or {},
        "fixable": bool(fixable),
    }


# ------------------------------------------------------------------------------------
# 1) boundary_edges (open mesh)
# ------------------------------------------------------------------------------------
def boundary_edges(mv, th, cache) -> Dict:
    """
    Edges with a single incident half-edge. Examples are (v0, v1).
    """
    pm = cache["mesh"]
    eids = cache["boundary_edges"]
    limit = int(th.get("max_examples", 25))
    allowed = th.get("max_boundary_edges")
    allowed = 0 if allowed is None else int(allowed)

    return _finding(
        "boundary_edges",
        ok=len(eids) <= allowed,
        count=len(eids),
        examples=[(pm.edge_vertex0(int(e)), pm.edge_vertex1(int(e))) for e in eids[:limit]],
        details={
            "max_allowed": allowed,
            "boundary_vertices": int(pm.boundary_vertices().size),
            "note": "Open mesh; closed-surface exporters will reject it.",
        },
        fixable=True,
        limit=limit,
    )


# ------------------------------------------------------------------------------------
# 2) non_triangle_faces (quads / polygons)
# ------------------------------------------------------------------------------------
def non_triangle_faces(mv, th, cache) -> Dict:
    """
    Faces with more than three corners. Examples are (face, size).
    """
    pm = cache["mesh"]
    fids = cache["non_triangles"]
    limit = int(th.get("max_examples", 25))

    sizes: Dict[int, int] = {}
    for f in fids.tolist():
        k = pm.face_size(f)
        sizes[k] = sizes.get(k, 0) + 1

    return _finding(
        "non_triangle_faces",
        ok=len(fids) == 0,
        count=len(fids),
        examples=[(int(f), pm.face_size(int(f))) for f in fids[:limit]],
        details={"sizes": sizes},
        fixable=True,
        limit=limit,
    )


# ------------------------------------------------------------------------------------
# 3) multiple_components (disconnected shells)
# ------------------------------------------------------------------------------------
def multiple_components(mv, th, cache) -> Dict:
    """
    More than one edge-connected face component.
    """
    pm = cache["mesh"]
    n = pm.number_of_connected_components()
    allowed = th.get("max_components")
    allowed = 1 if allowed is None else int(allowed)

    return _finding(
        "multiple_components",
        ok=n <= allowed,
        count=max(n - allowed, 0),
        examples=[],
        details={"components": n, "max_allowed": allowed},
        fixable=False,
    )
