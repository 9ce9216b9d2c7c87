# -*- coding: utf-8 -*-
# PolyTopo/polymesh/stats/data/__init__.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/15/2025

Modules:
--------
- reader:    MeshData container and meshio-based loading.
- topology:  inventory, valence and face-size statistics.
"""

__all__ = ["reader", "topology"]
