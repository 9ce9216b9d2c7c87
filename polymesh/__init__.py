# -*- coding: utf-8 -*-
# PolyTopo/polymesh/__init__.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/17/2025

Topology of polygon meshes: half-edge connectivity over a -1 separated corner array,
boundary / regular / singular classification, rule-based checks and summaries.
"""

from .core import PolygonMesh, TopologyError
from .api import build_polygon_mesh, analyze

__all__ = ["PolygonMesh", "TopologyError", "build_polygon_mesh", "analyze"]
