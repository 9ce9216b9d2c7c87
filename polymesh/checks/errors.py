# -*- coding: utf-8 -*-
# PolyTopo/polymesh/checks/errors.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/16/2025

Purpose:
--------
ERROR-tier topology rules. Each rule inspects a read-only `MeshView` and the shared cache
and returns one normalized "finding" record that downstream tooling (CLI/CI/GUI) can
aggregate, pretty-print, or turn into exit codes.

Main Tasks:
-----------
   - Define rules with the uniform signature: `<rule_id>(mv, th, cache) -> dict`.
   - Read the classified `PolygonMesh` and id lists from `cache` (see `helpers.precompute_cache`).
   - Emit findings with a stable schema for machine consumption.

Inputs/Contracts:
-----------------
- `mv` : MeshView (immutable)
- `th` : dict (thresholds / options)
    `max_examples` caps the examples list. Unknown keys are ignored.
- `cache` : dict with `mesh`, `singular_edges`, `singular_vertices`, `flipped_edges`, `degenerate`.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error",
      "ok": bool,                  # True => pass; False => violation(s) found
      "count": int,                # number of violations (or 0)
      "examples": [...],           # compact sample (capped)
      "details": {...},            # extra context
      "fixable": bool,             # True if an automatic repair is plausible
    }

Notes:
------
   - A mesh with any failing rule here is not a 2-manifold (or is not consistently
     oriented) and should not be handed to exporters that assume one.
"""

from typing import Dict, List

# ---- Shared finding builder ----
def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict,
             fixable: bool = True, limit: int = 25):
    return {
        "id": rule_id,
        "severity": "error",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:limit],
        "details": details or {},
        "fixable": bool(fixable),
    }


def _edge_pairs(pm, eids) -> List:
    return [(pm.edge_vertex0(int(e)), pm.edge_vertex1(int(e))) for e in eids]


# ------------------------------------------------------------------------------------
# 1) singular_edges (more than two faces on one edge)
# ------------------------------------------------------------------------------------
def singular_edges(mv, th, cache) -> Dict:
    """
    Edges shared by more than two half-edges. Examples are (v0, v1, n_half_edges).
    """
    pm = cache["mesh"]
    eids = cache["singular_edges"]
    limit = int(th.get("max_examples", 25))

    examples = [(pm.edge_vertex0(int(e)), pm.edge_vertex1(int(e)), pm.number_of_edge_half_edges(int(e)))
                for e in eids[:limit]]
    return _finding(
        "singular_edges",
        ok=len(eids) == 0,
        count=len(eids),
        examples=examples,
        details={"note": "Each edge of a 2-manifold borders at most two faces."},
        fixable=False,
        limit=limit,
    )


# ------------------------------------------------------------------------------------
# 2) singular_vertices (vertex star is not a single disk)
# ------------------------------------------------------------------------------------
def singular_vertices(mv, th, cache) -> Dict:
    """
    Vertices whose corners split into more than one part across regular edges.
    Examples are (vertex, n_parts).
    """
    pm = cache["mesh"]
    vids = cache["singular_vertices"]
    limit = int(th.get("max_examples", 25))

    examples = [(int(v), pm.number_of_vertex_parts(int(v))) for v in vids[:limit]]
    return _finding(
        "singular_vertices",
        ok=len(vids) == 0,
        count=len(vids),
        examples=examples,
        details={"note": "Faces around the vertex form several fans (bowtie / pinched vertex)."},
        fixable=True,
        limit=limit,
    )


# ------------------------------------------------------------------------------------
# 3) inconsistent_orientation (flipped neighbours)
# ------------------------------------------------------------------------------------
def inconsistent_orientation(mv, th, cache) -> Dict:
    """
    Regular edges whose two half-edges run the same direction.
    """
    pm = cache["mesh"]
    eids = cache["flipped_edges"]
    limit = int(th.get("max_examples", 25))

    faces = []
    for e in eids[:limit]:
        faces.append(tuple(pm.get_edge_face(int(e), j) for j in range(2)))

    return _finding(
        "inconsistent_orientation",
        ok=len(eids) == 0,
        count=len(eids),
        examples=_edge_pairs(pm, eids[:limit]),
        details={"face_pairs": faces},
        fixable=True,
        limit=limit,
    )


# ------------------------------------------------------------------------------------
# 4) degenerate_edges (source == destination)
# ------------------------------------------------------------------------------------
def degenerate_edges(mv, th, cache) -> Dict:
    """
    Half-edges that start and end at the same vertex (repeated vertex in a face).
    Examples are (corner, face, vertex).
    """
    pm = cache["mesh"]
    cids = cache["degenerate"]
    limit = int(th.get("max_examples", 25))

    examples = [(int(c), pm.get_face(int(c)), pm.get_src(int(c))) for c in cids[:limit]]
    return _finding(
        "degenerate_edges",
        ok=len(cids) == 0,
        count=len(cids),
        examples=examples,
        details={},
        fixable=True,
        limit=limit,
    )
