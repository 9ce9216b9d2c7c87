# -*- coding: utf-8 -*-
# PolyTopo/polymesh/core/__init__.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/14/2025

Core Subpackage:
----------------
Connectivity of polygon meshes given as a flat, -1 separated corner array.

Modules:
--------
- faces:         face ranges over the corner array.
- graph:         undirected edge index (vertex pair -> edge id).
- partition:     union-find used during classification.
- halfedges:     half-edge adjacency (face, src/dst, next/prev, twin, edge incidence).
- polygon_mesh:  boundary / regular / singular classification.
- errors:        construction errors.
"""

from .errors import TopologyError, VertexCountError, IndexRangeError, FaceSizeError, ExportError
from .faces import Faces
from .graph import Edges
from .partition import Partition
from .halfedges import HalfEdges, TWIN_POLICIES
from .polygon_mesh import PolygonMesh

__all__ = [
    "Faces",
    "Edges",
    "Partition",
    "HalfEdges",
    "PolygonMesh",
    "TWIN_POLICIES",
    "TopologyError",
    "VertexCountError",
    "IndexRangeError",
    "FaceSizeError",
    "ExportError",
]
