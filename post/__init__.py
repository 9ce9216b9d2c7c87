# -*- coding: utf-8 -*-
# PolyTopo/post/__init__.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/17/2025

Modules:
--------
- plot_stats:  Bars/histograms of the topology classification, vertex valence and face sizes.
               Headless-safe matplotlib backend.

- plot_mesh:   Wireframe of the mesh with edges coloured by class (boundary / regular /
               singular / flipped). Needs vertex coordinates.
"""

__all__ = ["plot_stats", "plot_mesh"]
