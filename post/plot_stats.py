# -*- coding: utf-8 -*-
# PolyTopo/post/plot_stats.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/17/2025

Purpose:
--------
Simple matplotlib-based visualizations of the topology classification. Utilities here plot:
edge classes (boundary / regular / singular), vertex classes (internal / boundary / singular),
the vertex-valence histogram and the face-size histogram.

Main Tasks:
-----------
    1) Provide a safe pyplot getter that works headless (sets Agg if no DISPLAY).
    2) Accept a PolygonMesh, MeshData, `(n_vertices, coord_index)` pair or a mesh path.
    3) Return the figure; optionally save it and/or show it.

Notes:
------
- No hard dependency on matplotlib until a plotting function is called.
- Counts come from `polymesh.stats.data.topology`.
"""

import os
from typing import Optional

from polymesh.core.polygon_mesh import PolygonMesh
from polymesh.stats.data.reader import ensure_mesh_data
from polymesh.stats.data.topology import inventory, valence, face_sizes


# -----------------------
# Internal utilities
# -----------------------
def _get_pyplot():
    """
    Lazy-import matplotlib.pyplot and set non-interactive backend if needed.

    Returns
    -------
    module
        The `matplotlib.pyplot` module.
    """
    import matplotlib
    if not os.environ.get("DISPLAY"):
        matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    return plt


def _ensure_polygon_mesh(mesh) -> PolygonMesh:
    """Accept a PolygonMesh or anything `ensure_mesh_data` understands."""
    if isinstance(mesh, PolygonMesh):
        return mesh
    data = ensure_mesh_data(mesh)
    return PolygonMesh(data.n_vertices, data.coord_index)


def _finish(plt, fig, show: bool, save_path: Optional[str]):
    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches="tight")
    if show:
        plt.show()
    return fig


def _bars(ax, labels, values):
    bars = ax.bar(labels, values)
    for b, v in zip(bars, values):
        ax.annotate(str(v), (b.get_x() + b.get_width() / 2, b.get_height()),
                    ha="center", va="bottom", fontsize=8)


# -----------------------
# Public plotting API
# -----------------------
def plot_edge_classification(mesh, show: bool = False, save_path: Optional[str] = None):
    """
    Bar chart of edge counts: boundary, regular, singular (and flipped regular edges).

    Parameters
    ----------
    mesh : PolygonMesh, MeshData, (int, sequence) or str
        Mesh to plot.
    show : bool, optional
        If True, show the figure interactively.
    save_path : str or None, optional
        If provided, save the figure to this path.

    Returns
    -------
    matplotlib.figure.Figure
    """
    plt = _get_pyplot()
    inv = inventory(_ensure_polygon_mesh(mesh))

    fig, ax = plt.subplots(figsize=(6, 4))
    _bars(ax, ["boundary", "regular", "singular", "flipped"],
          [inv["nE_boundary"], inv["nE_regular"], inv["nE_singular"], inv["nE_flipped"]])
    ax.set_ylabel("edges")
    ax.set_title("Edge classification")
    return _finish(plt, fig, show, save_path)


def plot_vertex_classification(mesh, show: bool = False, save_path: Optional[str] = None):
    """
    Bar chart of vertex counts: internal, boundary, singular.
    A singular vertex can also be a boundary vertex, so the bars may overlap.
    """
    plt = _get_pyplot()
    inv = inventory(_ensure_polygon_mesh(mesh))

    fig, ax = plt.subplots(figsize=(6, 4))
    _bars(ax, ["internal", "boundary", "singular"],
          [inv["nV_internal"], inv["nV_boundary"], inv["nV_singular"]])
    ax.set_ylabel("vertices")
    ax.set_title("Vertex classification")
    return _finish(plt, fig, show, save_path)


def plot_valence_hist(mesh, show: bool = False, save_path: Optional[str] = None):
    """
    Histogram of vertex valence (edges incident per vertex), discrete bars.
    """
    plt = _get_pyplot()
    hist = valence(_ensure_polygon_mesh(mesh))["hist"]

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(list(hist.keys()), list(hist.values()), width=0.8)
    ax.set_xlabel("valence")
    ax.set_ylabel("vertices")
    ax.set_title("Vertex valence")
    return _finish(plt, fig, show, save_path)


def plot_face_size_hist(mesh, show: bool = False, save_path: Optional[str] = None):
    """
    Histogram of face sizes (corners per face).
    """
    plt = _get_pyplot()
    hist = face_sizes(_ensure_polygon_mesh(mesh))["hist"]

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(list(hist.keys()), list(hist.values()), width=0.8)
    ax.set_xlabel("corners per face")
    ax.set_ylabel("faces")
    ax.set_title("Face sizes")
    return _finish(plt, fig, show, save_path)
