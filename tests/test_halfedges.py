# -*- coding: utf-8 -*-
# PolyTopo/tests/test_halfedges.py

import pytest

from polymesh.core.errors import IndexRangeError, VertexCountError
from polymesh.core.halfedges import HalfEdges


def test_counts(tetra):
    he = HalfEdges(*tetra)
    assert he.number_of_vertices() == 4
    assert he.number_of_edges() == 6
    assert he.number_of_faces() == 4
    assert he.number_of_corners() == 16
    assert he.number_of_half_edges() == 12
    assert he.half_edges().tolist() == [0, 1, 2, 4, 5, 6, 8, 9, 10, 12, 13, 14]


def test_navigation(tetra):
    he = HalfEdges(*tetra)
    assert he.get_src(0) == 0
    assert he.get_dst(0) == 2
    assert he.get_dst(2) == 0  # wraps to the face's first vertex
    assert he.get_next(2) == 0
    assert he.get_prev(0) == 2
    assert he.get_next(14) == 12
    assert he.get_face(9) == 2
    # sentinel and out of range
    for cid in (3, 16, -1):
        assert he.get_face(cid) == -1
        assert he.get_next(cid) == -1
        assert he.get_prev(cid) == -1
        assert he.get_twin(cid) == -1
        assert he.get_dst(cid) == -1


def test_twins(tetra):
    he = HalfEdges(*tetra)
    expected = {0: 14, 1: 8, 2: 4, 5: 10, 6: 12, 9: 13}
    for a, b in expected.items():
        assert he.get_twin(a) == b
        assert he.get_twin(b) == a


def test_edge_incidence(tetra):
    he = HalfEdges(*tetra)
    assert he.get_corner_edge(0) == 0
    assert he.get_corner_edge(14) == 0
    assert he.get_corner_edge(3) == -1
    assert he.edge_half_edges(0) == [0, 14]
    assert he.number_of_edge_half_edges(0) == 2
    assert he.get_edge_half_edge(0, 1) == 14
    assert he.get_edge_half_edge(0, 2) == -1
    assert he.number_of_edge_half_edges(6) == 0
    assert he.edge_half_edges(-1) == []
    assert he.get_edge(2, 0) == 0
    assert (he.edge_vertex0(5), he.edge_vertex1(5)) == (2, 3)


def test_loop_and_twin_invariants(cube):
    he = HalfEdges(*cube)
    for c in he.half_edges().tolist():
        assert he.get_prev(he.get_next(c)) == c
        assert he.get_next(he.get_prev(c)) == c
        assert he.get_src(he.get_next(c)) == he.get_dst(c)

        k = he.face_size(he.get_face(c))
        walk = c
        for _ in range(k):
            walk = he.get_next(walk)
        assert walk == c

        t = he.get_twin(c)
        assert t >= 0
        assert he.get_twin(t) == c
        assert he.get_src(t) == he.get_dst(c)
        assert he.get_dst(t) == he.get_src(c)


def test_every_edge_sums_to_half_edges(cube):
    he = HalfEdges(*cube)
    total = sum(he.number_of_edge_half_edges(e) for e in range(he.number_of_edges()))
    assert total == he.number_of_half_edges() == 36


def test_singular_edge_regular_policy(triple_edge):
    he = HalfEdges(*triple_edge)
    eid = he.get_edge(0, 1)
    assert he.number_of_edge_half_edges(eid) == 3
    assert he.edge_half_edges(eid) == [0, 4, 8]
    for c in (0, 4, 8):
        assert he.get_twin(c) == -1


def test_singular_edge_scan_policy(triple_edge):
    he = HalfEdges(*triple_edge, twin_policy="scan")
    assert he.get_twin(0) == 4
    assert he.get_twin(4) == 0
    assert he.get_twin(8) == -1


def test_unknown_twin_policy(tetra):
    with pytest.raises(ValueError):
        HalfEdges(*tetra, twin_policy="closest")


def test_flipped_edge_still_paired(flipped_pair):
    he = HalfEdges(*flipped_pair)
    eid = he.get_edge(0, 1)
    assert he.get_twin(0) == 4
    assert he.get_twin(4) == 0
    assert he.is_consistently_oriented_edge(eid) is False
    assert he.is_consistently_oriented_edge(he.get_edge(1, 2)) is False


def test_consistent_edge(tetra):
    he = HalfEdges(*tetra)
    assert all(he.is_consistently_oriented_edge(e) for e in range(6))


def test_corner_value_out_of_range():
    with pytest.raises(IndexRangeError) as exc:
        HalfEdges(3, [0, 1, 3, -1])
    assert exc.value.context == {"corner": 2, "value": 3, "n_vertices": 3}
    assert "position 2" in str(exc.value)

    with pytest.raises(IndexRangeError):
        HalfEdges(3, [0, 1, -2, -1, 0, 1, 2, -1])


def test_vertex_count_checked_after_range():
    with pytest.raises(VertexCountError):
        HalfEdges(5, [0, 1, 2, -1])


def test_coord_index_is_owned(tetra):
    n, ci = tetra
    he = HalfEdges(n, ci)
    ci[0] = 3
    assert he.coord_index[0] == 0
    assert not he.coord_index.flags.writeable
