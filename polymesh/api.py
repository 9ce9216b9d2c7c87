# -*- coding: utf-8 -*-
# PolyTopo/polymesh/api.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/17/2025

Purpose
-------
High-level entry points: build a classified `PolygonMesh` from a corner array, and run the
full analysis (summary + rule checks) on any accepted mesh source.

Main Tasks
----------
    1. `build_polygon_mesh`: construct the half-edge mesh and log a one-line inventory.
    2. `analyze`: `stats.report.summarize` and `checks.run_checks` over the same source,
       sharing the twin policy from the check configuration.
"""

from typing import Any, Dict, Optional, Sequence
import logging

from polymesh.core.polygon_mesh import PolygonMesh
from polymesh.checks import DEFAULTS, run_checks, _deep_merge
from polymesh.stats.data.reader import ensure_mesh_data
from polymesh.stats.report import summarize

logger = logging.getLogger(__name__)


def build_polygon_mesh(
    n_vertices: int,
    coord_index: Sequence[int],
    *,
    twin_policy: str = "regular",
) -> PolygonMesh:
    """
    Build the half-edge mesh and its classification.

    Parameters
    ----------
    n_vertices : int
        Number of distinct vertices referenced by `coord_index`.
    coord_index : sequence of int
        Flat corner array; every face is closed by -1.
    twin_policy : {"regular", "scan"}, optional
        "regular": only half-edges on regular edges have twins.
        "scan": the first two half-edges seen on any edge are twins.

    Returns
    -------
    PolygonMesh

    Raises
    ------
    VertexCountError, IndexRangeError, FaceSizeError
        If the corner array is malformed.
    ValueError
        If `twin_policy` is unknown.
    """
    pm = PolygonMesh(n_vertices, coord_index, twin_policy=twin_policy)
    logger.info(
        "[build_polygon_mesh] V=%d E=%d F=%d C=%d | boundary_edges=%d singular_edges=%d "
        "singular_vertices=%d components=%d",
        pm.number_of_vertices(), pm.number_of_edges(), pm.number_of_faces(), pm.number_of_corners(),
        pm.boundary_edges().size, pm.singular_edges().size, pm.singular_vertices().size,
        pm.number_of_connected_components(),
    )
    return pm


def analyze(source: Any, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Summarize and check a mesh in one call.

    Parameters
    ----------
    source : str | MeshData | (int, sequence)
        Mesh path, loaded data, or `(n_vertices, coord_index)` pair.
    config : dict, optional
        Check configuration (see `polymesh.checks.DEFAULTS`). `config["summary"]`, if
        present, is passed as report thresholds.

    Returns
    -------
    dict
        {"summary": <summarize() payload>, "checks": <run_checks() payload>}
    """
    cfg = dict(config or {})
    summary_thresholds = cfg.pop("summary", None)
    twin_policy = _deep_merge(DEFAULTS, cfg)["thresholds"]["twin_policy"]

    data = ensure_mesh_data(source)
    return {
        "summary": summarize(data, thresholds=summary_thresholds, twin_policy=twin_policy),
        "checks": run_checks(data, cfg),
    }
