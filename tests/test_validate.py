# -*- coding: utf-8 -*-
# PolyTopo/tests/test_validate.py

import numpy as np
import pytest

from polymesh.core.errors import ExportError, TopologyError
from polymesh.core.polygon_mesh import PolygonMesh
from polymesh.tools.utils import coord_index_to_faces, count_distinct_vertices, faces_to_coord_index
from polymesh.tools.validate import check_exportable, check_triangle_mesh


def test_closed_triangle_mesh_is_exportable(cube):
    pm = PolygonMesh(*cube)
    check_triangle_mesh(pm)
    check_exportable(pm, require_regular=True, require_closed=True, require_oriented=True)


def test_quads_rejected(cube_quads):
    with pytest.raises(ExportError) as exc:
        check_triangle_mesh(PolygonMesh(*cube_quads), name="cube")
    assert exc.value.context["count"] == 6
    assert exc.value.context["name"] == "cube"
    assert isinstance(exc.value, TopologyError)


def test_empty_rejected():
    with pytest.raises(ExportError, match="no faces"):
        check_triangle_mesh(PolygonMesh(0, []))


def test_requirements(open_fan, triple_edge, flipped_pair):
    fan = PolygonMesh(*open_fan)
    check_exportable(fan, require_regular=True, require_oriented=True)
    with pytest.raises(ExportError, match="boundary"):
        check_exportable(fan, require_closed=True)

    with pytest.raises(ExportError, match="not regular") as exc:
        check_exportable(PolygonMesh(*triple_edge), require_regular=True)
    assert exc.value.context["singular_vertices"] == [0, 1]

    flipped = PolygonMesh(*flipped_pair)
    check_exportable(flipped, require_regular=True)
    with pytest.raises(ExportError, match="oriented"):
        check_exportable(flipped, require_oriented=True)


def test_error_string_carries_context():
    err = TopologyError("bad mesh", {"b": 2, "a": "x" * 200})
    s = str(err)
    assert s.startswith("bad mesh | a=")
    assert s.endswith("b=2")
    assert "..." in s
    assert str(TopologyError("plain")) == "plain"


def test_face_list_conversions():
    ci = faces_to_coord_index([[0, 1, 2], (2, 3, 4, 5)])
    assert ci.dtype == np.int64
    assert ci.tolist() == [0, 1, 2, -1, 2, 3, 4, 5, -1]
    assert coord_index_to_faces(ci) == [[0, 1, 2], [2, 3, 4, 5]]
    # a trailing face without sentinel is kept
    assert coord_index_to_faces([0, 1, 2, -1, 3, 4, 5]) == [[0, 1, 2], [3, 4, 5]]
    assert count_distinct_vertices(ci) == 6
