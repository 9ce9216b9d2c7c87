# -*- coding: utf-8 -*-
# PolyTopo/polymesh/tools/validate.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/15/2025

Purpose:
-------
Gatekeeping for strict output formats. A writer that only accepts triangles (STL-like
formats with one normal per face) calls these before opening its output file.

Main Tasks:
----------
   - check_triangle_mesh: at least one face, and every face is a triangle.
   - check_exportable: triangle check plus optional regularity / closedness / orientation.

Notes:
------
   - Both functions raise `ExportError` with the offending ids in its context and
     return None on success.
"""

from typing import Optional

import numpy as np

from polymesh.core.errors import ExportError
from polymesh.core.polygon_mesh import PolygonMesh


def check_triangle_mesh(pm: PolygonMesh, name: Optional[str] = None) -> None:
    """
    Require a non-empty mesh made only of triangles.

    Raises
    ------
    ExportError
        If the mesh has no faces, or any face has a size other than 3.
    """
    ctx = {"name": name} if name else {}
    if pm.number_of_faces() < 1:
        raise ExportError("Mesh has no faces.", ctx)
    sizes = np.asarray(pm.face_sizes(), dtype=np.int64)
    bad = np.flatnonzero(sizes != 3)
    if bad.size:
        ctx.update({"faces": bad[:10].tolist(), "count": int(bad.size)})
        raise ExportError("Mesh is not a triangle mesh.", ctx)


def check_exportable(
    pm: PolygonMesh,
    *,
    require_regular: bool = False,
    require_closed: bool = False,
    require_oriented: bool = False,
    name: Optional[str] = None,
) -> None:
    """
    Verify a mesh can be written to a strict triangle format.

    Parameters
    ----------
    pm : PolygonMesh
        Classified mesh.
    require_regular : bool
        Reject singular edges and singular vertices.
    require_closed : bool
        Reject boundary edges.
    require_oriented : bool
        Reject regular edges whose two faces are wound inconsistently.
    name : str, optional
        Mesh name, only used in error context.

    Raises
    ------
    ExportError
        On the first requirement that is not met.
    """
    check_triangle_mesh(pm, name=name)
    ctx = {"name": name} if name else {}

    if require_regular and not pm.is_regular():
        ctx.update({
            "singular_edges": pm.singular_edges()[:10].tolist(),
            "singular_vertices": pm.singular_vertices()[:10].tolist(),
        })
        raise ExportError("Mesh is not regular.", ctx)

    if require_closed and pm.has_boundary():
        ctx.update({"boundary_edges": int(pm.boundary_edges().size)})
        raise ExportError("Mesh has boundary edges.", ctx)

    if require_oriented and not pm.is_oriented():
        ctx.update({"flipped_edges": pm.inconsistently_oriented_edges()[:10].tolist()})
        raise ExportError("Mesh is not consistently oriented.", ctx)
