# -*- coding: utf-8 -*-
# PolyTopo/post/plot_mesh.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/17/2025

Purpose
-------
Quick wireframe of a polygon mesh with its edges coloured by topology class, so open
boundaries, non-manifold edges and flipped neighbours can be spotted at a glance.

Main Tasks
----------
    1) Take `MeshData` with coordinates (or a mesh path, read via meshio).
    2) Build one segment per undirected edge, grouped by class.
    3) Draw the groups as LineCollections on an XY (or chosen-plane) projection.
"""

from typing import Optional, Tuple

import numpy as np

from polymesh.core.polygon_mesh import PolygonMesh
from polymesh.stats.data.reader import ensure_mesh_data
from post.plot_stats import _get_pyplot

_STYLE = {
    "regular": ("0.6", 0.4),
    "boundary": ("tab:blue", 1.2),
    "flipped": ("tab:orange", 1.6),
    "singular": ("tab:red", 2.0),
}


def plot_classified_edges(
    mesh,
    show: bool = False,
    save_path: Optional[str] = None,
    *,
    axes: Tuple[int, int] = (0, 1),
    twin_policy: str = "regular",
):
    """
    Wireframe plot of every edge, coloured by class.

    Parameters
    ----------
    mesh : MeshData or str
        Mesh with coordinates (`points` must not be None).
    show : bool, optional
        If True, show the figure interactively.
    save_path : str or None, optional
        If given, save the figure to this path.
    axes : (int, int), optional
        Coordinate components used for the projection. Default XY.
    twin_policy : {"regular", "scan"}, optional
        Passed to the `PolygonMesh` constructor.

    Returns
    -------
    matplotlib.figure.Figure

    Raises
    ------
    ValueError
        If the mesh carries no coordinates.
    """
    from matplotlib.collections import LineCollection

    data = ensure_mesh_data(mesh)
    if data.points is None:
        raise ValueError("Mesh '{}' has no coordinates; cannot plot.".format(data.name))

    pm = PolygonMesh(data.n_vertices, data.coord_index, twin_policy=twin_policy)
    pts = np.asarray(data.points, dtype=float)[:, list(axes)]

    groups = {
        "regular": pm.regular_edges(),
        "boundary": pm.boundary_edges(),
        "singular": pm.singular_edges(),
        "flipped": pm.inconsistently_oriented_edges(),
    }

    plt = _get_pyplot()
    fig, ax = plt.subplots(figsize=(8, 8))
    for name in ("regular", "boundary", "flipped", "singular"):
        eids = groups[name]
        if eids.size == 0:
            continue
        ends = np.array([(pm.edge_vertex0(int(e)), pm.edge_vertex1(int(e))) for e in eids])
        color, lw = _STYLE[name]
        ax.add_collection(LineCollection(pts[ends], colors=color, linewidths=lw,
                                         label="{} ({})".format(name, eids.size)))

    ax.autoscale()
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("xyz"[axes[0]])
    ax.set_ylabel("xyz"[axes[1]])
    ax.set_title("Edge classes: {}".format(data.name or "mesh"))
    ax.legend(loc="best", fontsize=8)

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches="tight")
    if show:
        plt.show()
    return fig
