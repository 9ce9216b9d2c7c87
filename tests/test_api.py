# -*- coding: utf-8 -*-
# PolyTopo/tests/test_api.py

import logging

import pytest

from polymesh import PolygonMesh, analyze, build_polygon_mesh


def test_build_logs_inventory(cube, caplog):
    with caplog.at_level(logging.INFO, logger="polymesh.api"):
        pm = build_polygon_mesh(*cube)
    assert isinstance(pm, PolygonMesh)
    assert "[build_polygon_mesh]" in caplog.text
    assert "E=18" in caplog.text


def test_build_twin_policy(triple_edge):
    assert build_polygon_mesh(*triple_edge).get_twin(0) == -1
    assert build_polygon_mesh(*triple_edge, twin_policy="scan").get_twin(0) == 4


def test_analyze(open_fan):
    res = analyze(open_fan)
    assert set(res) == {"summary", "checks"}
    assert res["summary"]["topology"]["nE_boundary"] == 5
    assert res["checks"]["ok"] is True


def test_analyze_with_summary_thresholds(open_fan):
    cfg = {"summary": {"max_boundary_edges": 0}, "thresholds": {"twin_policy": "scan"}}
    res = analyze(open_fan, cfg)
    assert res["summary"]["flags"]["ok"] is False
    assert res["checks"]["meta"]["thresholds"]["twin_policy"] == "scan"
    assert "summary" in cfg


def test_analyze_propagates_errors():
    with pytest.raises(ValueError):
        analyze((3, [0, 1, 2, -1]), {"thresholds": {"twin_policy": "bogus"}})
