# -*- coding: utf-8 -*-
# PolyTopo/tests/test_report_export.py

import csv
import json

import numpy as np
import pytest

from polymesh.core.polygon_mesh import PolygonMesh
from polymesh.stats.data.topology import inventory, valence, face_sizes
from polymesh.stats.export import (
    flatten_summary,
    write_summary_csv,
    write_summary_excel,
    write_summary_json,
)
from polymesh.stats.report import DEFAULT_THRESHOLDS, summarize


def test_inventory_bowtie(bowtie):
    inv = inventory(PolygonMesh(*bowtie))
    assert inv["nV"] == 5
    assert inv["nE"] == 6
    assert inv["nF"] == 2
    assert inv["nC"] == 8
    assert inv["nV_singular"] == 1
    assert inv["nV_regular"] == 4
    assert inv["nV_boundary"] == 5
    assert inv["nV_internal"] == 0
    assert inv["nE_boundary"] == 6
    assert inv["components"] == 2
    assert inv["is_regular"] is False


def test_valence_and_face_sizes(tetra, cube_quads):
    assert valence(PolygonMesh(*tetra)) == {"min": 3, "max": 3, "mean": 3.0, "std": 0.0, "hist": {3: 4}}
    fs = face_sizes(PolygonMesh(*cube_quads))
    assert fs["hist"] == {4: 6}
    assert fs["mean"] == 4.0


def test_summary_of_closed_mesh(tetra):
    s = summarize(tetra)
    assert set(s) == {"topology", "valence", "face_sizes", "thresholds", "flags"}
    assert s["topology"]["nE"] == 6
    assert s["flags"]["ok"] is True
    # thresholds set to None are not evaluated
    assert set(s["flags"]["violations"]) == {"nE_singular", "nV_singular", "nE_flipped"}
    assert s["thresholds"] == DEFAULT_THRESHOLDS


def test_summary_flags_violations(triple_edge):
    s = summarize(triple_edge)
    assert s["flags"]["ok"] is False
    v = s["flags"]["violations"]["nE_singular"]
    assert v == {"value": 1, "max_allowed": 0, "ok": False}


def test_summary_custom_thresholds(open_fan):
    s = summarize(open_fan, thresholds={"max_boundary_edges": 0})
    assert s["flags"]["violations"]["nE_boundary"]["value"] == 5
    assert s["flags"]["ok"] is False
    assert DEFAULT_THRESHOLDS["max_boundary_edges"] is None


def test_summary_accepts_polygon_mesh(cube):
    pm = PolygonMesh(*cube)
    assert summarize(pm)["topology"]["nF"] == 12


def test_flatten_summary():
    rows = flatten_summary({"b": {"y": np.int64(3), "x": [1, 2]}, "a": None})
    assert rows == [("a", None), ("b.x", "[1, 2]"), ("b.y", 3)]
    assert type(rows[2][1]) is int


def test_write_csv_and_json(tmp_path, tetra):
    s = summarize(tetra)

    csv_path = write_summary_csv(s, str(tmp_path / "out" / "summary.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["key", "value"]
    assert ["topology.nV", "4"] in rows
    assert ["flags.ok", "True"] in rows

    json_path = write_summary_json(s, str(tmp_path / "summary.json"))
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)
    assert data["topology"]["nC"] == 16
    assert data["valence"]["hist"] == {"3": 4}


def test_write_excel(tmp_path, tetra):
    pd = pytest.importorskip("pandas")
    pytest.importorskip("openpyxl")
    path = write_summary_excel(summarize(tetra), str(tmp_path / "summary.xlsx"))
    df = pd.read_excel(path)
    assert list(df.columns) == ["key", "value"]
    assert "topology.nE" in df["key"].tolist()
