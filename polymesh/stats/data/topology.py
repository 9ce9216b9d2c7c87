# -*- coding: utf-8 -*-
# PolyTopo/polymesh/stats/data/topology.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/15/2025

Purpose:
--------
Compute topological statistics of a classified mesh: global inventory of vertices, edges,
faces and corners with their classification tallies, the vertex valence distribution and
the face size distribution.

Main Tasks:
-----------
    1) `inventory`:
        - Count vertices, edges, faces, corners.
        - Tally boundary/internal/regular/singular vertices and boundary/regular/singular edges.
        - Report mesh-level predicates (regular, boundary, oriented, triangles, components).
    2) `valence`:
        - Edges incident to each vertex; min/max/mean/std and histogram.
    3) `face_sizes`:
        - Histogram of corners per face.

Notes:
------
- Histograms are returned as {value: frequency}.
"""

import numpy as np

from polymesh.core.polygon_mesh import PolygonMesh


def _histogram(values: np.ndarray) -> dict:
    if values.size == 0:
        return {"min": 0, "max": 0, "mean": 0.0, "std": 0.0, "hist": {}}
    unique, freq = np.unique(values, return_counts=True)
    return {
        "min": int(values.min()),
        "max": int(values.max()),
        "mean": float(values.mean()),
        "std": float(values.std()),
        "hist": {int(u): int(f) for u, f in zip(unique, freq)},
    }


def inventory(pm: PolygonMesh) -> dict:
    """
    Build a global inventory of mesh size and classification.

    Parameters
    ----------
    pm : PolygonMesh
        Classified mesh.

    Returns
    -------
    dict
        {
          "nV", "nE", "nF", "nC": int,
          "nV_boundary", "nV_internal", "nV_regular", "nV_singular": int,
          "nE_boundary", "nE_regular", "nE_singular": int,
          "is_regular", "has_boundary", "is_oriented", "is_triangle_mesh": bool,
          "nE_flipped": int,
          "components": int
        }
    """
    n_v = pm.number_of_vertices()
    n_e = pm.number_of_edges()
    nv_bnd = int(pm.boundary_vertices().size)
    nv_sing = int(pm.singular_vertices().size)
    ne_bnd = int(pm.boundary_edges().size)
    ne_reg = int(pm.regular_edges().size)
    ne_sing = int(pm.singular_edges().size)

    return {
        "nV": n_v,
        "nE": n_e,
        "nF": pm.number_of_faces(),
        "nC": pm.number_of_corners(),
        "nV_boundary": nv_bnd,
        "nV_internal": n_v - nv_bnd,
        "nV_regular": n_v - nv_sing,
        "nV_singular": nv_sing,
        "nE_boundary": ne_bnd,
        "nE_regular": ne_reg,
        "nE_singular": ne_sing,
        "nE_flipped": int(pm.inconsistently_oriented_edges().size),
        "is_regular": pm.is_regular(),
        "has_boundary": pm.has_boundary(),
        "is_oriented": pm.is_oriented(),
        "is_triangle_mesh": pm.is_triangle_mesh(),
        "components": pm.number_of_connected_components(),
    }


def valence(pm: PolygonMesh) -> dict:
    """
    Vertex valence distribution (edges incident per vertex).

    Returns
    -------
    dict
        {"min": int, "max": int, "mean": float, "std": float, "hist": {valence: frequency}}
        Zeros and an empty hist for a mesh without vertices.
    """
    return _histogram(np.asarray(pm.vertex_valence(), dtype=np.int64))


def face_sizes(pm: PolygonMesh) -> dict:
    """Face size distribution (corners per face), same schema as `valence`."""
    return _histogram(np.asarray(pm.face_sizes(), dtype=np.int64))
