# -*- coding: utf-8 -*-
# PolyTopo/tests/test_faces.py

import numpy as np
import pytest

from polymesh.core.errors import FaceSizeError, TopologyError, VertexCountError
from polymesh.core.faces import Faces


def test_face_ranges(tetra):
    n, ci = tetra
    f = Faces(n, ci)
    assert f.number_of_vertices() == 4
    assert f.number_of_faces() == 4
    assert f.number_of_corners() == 16
    assert f.face_start.tolist() == [0, 4, 8, 12]
    assert f.face_end.tolist() == [3, 7, 11, 15]
    assert [f.face_size(i) for i in range(4)] == [3, 3, 3, 3]
    assert f.face_first_corner(2) == 8
    assert list(f.face_corners(1)) == [4, 5, 6]


def test_face_vertex_and_corner_face(tetra):
    f = Faces(*tetra)
    assert f.face_vertex(1, 4) == 0
    assert f.face_vertex(1, 6) == 3
    # corner of another face, and the sentinel
    assert f.face_vertex(0, 4) == -1
    assert f.face_vertex(0, 3) == -1
    assert f.corner_face(5) == 1
    assert f.corner_face(3) == -1
    assert f.corner_face(99) == -1


def test_next_corner_crosses_faces(tetra):
    f = Faces(*tetra)
    assert f.next_corner(0) == 1
    assert f.next_corner(2) == 4
    assert f.next_corner(14) == -1
    assert f.next_corner(3) == -1
    assert f.next_corner(-1) == -1


def test_invalid_queries_return_minus_one(tetra):
    f = Faces(*tetra)
    assert f.face_size(4) == -1
    assert f.face_first_corner(-1) == -1
    assert list(f.face_corners(10)) == []


def test_owns_read_only_copy():
    ci = np.array([0, 1, 2, -1])
    f = Faces(3, ci)
    ci[0] = 2
    assert f.coord_index[0] == 0
    with pytest.raises(ValueError):
        f.coord_index[0] = 1


def test_vertex_count_mismatch():
    with pytest.raises(VertexCountError) as exc:
        Faces(4, [0, 1, 2, -1])
    assert exc.value.context == {"n_vertices": 4, "distinct_indices": 3}
    assert isinstance(exc.value, TopologyError)


@pytest.mark.parametrize("ci, n", [
    ([0, 1, -1], 2),                  # two corners
    ([0, 1, 2, -1, -1], 3),           # empty face
    ([0, 1, 2, -1, 2, 1, 0], 3),      # unterminated last face
])
def test_face_size_errors(ci, n):
    with pytest.raises(FaceSizeError):
        Faces(n, ci)


def test_empty_mesh():
    f = Faces(0, [])
    assert f.number_of_faces() == 0
    assert f.number_of_corners() == 0
    assert f.next_corner(0) == -1
