# -*- coding: utf-8 -*-
# PolyTopo/tests/conftest.py

"""
Shared mesh fixtures. Each fixture returns an `(n_vertices, coord_index)` pair.
"""

import numpy as np
import pytest

from polymesh.tools.utils import faces_to_coord_index

TETRA_FACES = [[0, 2, 1], [0, 1, 3], [1, 2, 3], [0, 3, 2]]

CUBE_QUADS = [
    [0, 3, 2, 1], [4, 5, 6, 7],
    [0, 1, 5, 4], [1, 2, 6, 5],
    [2, 3, 7, 6], [3, 0, 4, 7],
]


def _pair(faces):
    ci = faces_to_coord_index(faces)
    return int(np.unique(ci[ci >= 0]).size), ci.tolist()


@pytest.fixture
def tetra():
    """Closed, consistently oriented tetrahedron: V=4, E=6, F=4, C=16."""
    return _pair(TETRA_FACES)


@pytest.fixture
def cube_quads():
    return _pair(CUBE_QUADS)


@pytest.fixture
def cube():
    """Closed, consistently oriented cube of 12 triangles: V=8, E=18, F=12."""
    tris = []
    for a, b, c, d in CUBE_QUADS:
        tris.append([a, b, c])
        tris.append([a, c, d])
    return _pair(tris)


@pytest.fixture
def open_fan():
    """Three triangles around vertex 0, not closed: 5 boundary edges, 2 regular."""
    return _pair([[0, 1, 2], [0, 2, 3], [0, 3, 4]])


@pytest.fixture
def bowtie():
    """Two triangles touching only at vertex 0."""
    return _pair([[0, 1, 2], [0, 3, 4]])


@pytest.fixture
def triple_edge():
    """Three triangles on edge (0, 1)."""
    return _pair([[0, 1, 2], [1, 0, 3], [0, 1, 4]])


@pytest.fixture
def flipped_pair():
    """Two triangles on edge (0, 1) that both run 0 -> 1."""
    return _pair([[0, 1, 2], [0, 1, 3]])


@pytest.fixture
def pinched_tetras():
    """Two closed tetrahedra sharing vertex 3 only: every edge regular, vertex 3 singular."""
    remap = {0: 3, 1: 4, 2: 5, 3: 6}
    second = [[remap[v] for v in f] for f in TETRA_FACES]
    return _pair(TETRA_FACES + second)
