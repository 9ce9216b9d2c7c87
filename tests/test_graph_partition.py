# -*- coding: utf-8 -*-
# PolyTopo/tests/test_graph_partition.py

import pytest

from polymesh.core.errors import IndexRangeError
from polymesh.core.graph import Edges, hash_edge
from polymesh.core.partition import Partition


def test_hash_edge_is_unordered():
    assert hash_edge(3, 1) == hash_edge(1, 3) == (1, 3)


def test_insert_edge_idempotent_and_sequential():
    g = Edges(3)
    assert g.insert_edge(0, 1) == 0
    assert g.insert_edge(1, 0) == 0
    assert g.insert_edge(1, 2) == 1
    assert g.number_of_edges() == 2
    assert g.number_of_vertices() == 3
    assert g.get_edge(2, 1) == 1
    assert g.get_edge(0, 2) == -1
    assert g.get_edge(0, 7) == -1


def test_edge_endpoints():
    g = Edges(3)
    g.insert_edge(2, 1)
    assert (g.edge_vertex0(0), g.edge_vertex1(0)) == (1, 2)
    assert g.edge_vertex0(5) == -1
    assert g.edge_vertex1(-1) == -1


def test_insert_out_of_range():
    g = Edges(3)
    with pytest.raises(IndexRangeError):
        g.insert_edge(0, 3)
    with pytest.raises(IndexRangeError):
        g.insert_edge(-1, 0)


def test_partition_join_and_sizes():
    p = Partition(6)
    assert len(p) == 6
    assert p.number_of_parts() == 6
    r = p.join(0, 1)
    assert r in (0, 1)
    p.join(1, 2)
    p.join(4, 5)
    assert p.find(0) == p.find(2)
    assert p.find(3) == 3
    assert p.size(2) == 3
    assert p.size(5) == 2
    assert p.number_of_parts() == 3


def test_partition_join_twice_is_noop():
    p = Partition(3)
    a = p.join(0, 1)
    assert p.join(1, 0) == a
    assert p.number_of_parts() == 2
