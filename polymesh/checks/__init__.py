# -*- coding: utf-8 -*-
# PolyTopo/polymesh/checks/__init__.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/16/2025

Purpose:
--------
Run the registered topology rules over one mesh and collect their findings in a
single payload (exit codes, JSON reports, dashboards).

Main Tasks
----------
   - `DEFAULTS`: which rules run and the thresholds they read.
   - Build the MeshView and the shared cache once, then call rules in registry order.
   - `ok` is False as soon as one error-tier rule fails; warnings never flip it.

Returned Schema:
----------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {
    "source": str, "n_vertices": int, "n_edges": int, "n_faces": int, "n_corners": int,
    "thresholds": dict, "enabled": dict
  }
}
"""

import copy
import logging
from typing import Any, Dict, Optional

from .helpers import build_mesh_view, precompute_cache
from .registry import REGISTRY, get_enabled_ids

logger = logging.getLogger(__name__)


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "enabled": {
        # errors
        "degenerate_edges": True,
        "singular_edges": True,
        "singular_vertices": True,
        "inconsistent_orientation": True,
        # warnings
        "boundary_edges": True,
        "non_triangle_faces": False,   # polygon meshes are legal input
        "multiple_components": True,
    },
    "thresholds": {
        "twin_policy": "regular",      # "regular" | "scan"
        "max_examples": 25,
        "max_boundary_edges": None,    # None -> any boundary edge is reported
        "max_components": None,        # None -> one shell expected
    },
}


# -------------------------
# Orchestrator
# -------------------------
def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge `upd` over `base` recursively; neither input is modified.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _meta(mv, cache, cfg):
    pm = cache["mesh"]
    return {
        "source": mv.source,
        "n_vertices": pm.number_of_vertices(),
        "n_edges": pm.number_of_edges(),
        "n_faces": pm.number_of_faces(),
        "n_corners": pm.number_of_corners(),
        "thresholds": copy.deepcopy(cfg.get("thresholds", {})),
        "enabled": copy.deepcopy(cfg.get("enabled", {})),
    }


def run_checks(source: Any, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (per registry order) against a mesh and return findings.

    Parameters
    ----------
    source : str | MeshData | (int, sequence)
        Mesh file path, loaded mesh data, or an `(n_vertices, coord_index)` pair.
    config : dict, optional
        Overrides for `DEFAULTS` with the same structure (keys: "enabled", "thresholds").

    Returns
    -------
    dict
        Payload with keys:
          - "ok": bool, False iff any ERROR-severity rule fails.
          - "rules": dict, rule_id -> finding dict.
          - "meta": dict, mesh sizes, thresholds, enabled map, source.

    Raises
    ------
    TopologyError
        If the corner array cannot be turned into a half-edge mesh at all.
    """
    cfg = _deep_merge(DEFAULTS, config or {})
    th = cfg.get("thresholds", {})
    mv = build_mesh_view(source)
    cache = precompute_cache(mv, th)

    results: Dict[str, Any] = {}
    for rid in get_enabled_ids(cfg.get("enabled")):
        spec = REGISTRY[rid]
        finding = spec.fn(mv, th, cache)
        finding["severity"] = spec.severity
        finding["id"] = rid
        results[rid] = finding

    ok = all(f.get("ok", False) for rid, f in results.items() if REGISTRY[rid].severity == "error")
    failed = [rid for rid, f in results.items() if not f["ok"]]
    logger.info("[run_checks] ok=%s failed=%s", ok, failed)

    return {
        "ok": ok,
        "rules": results,
        "meta": _meta(mv, cache, cfg),
    }


__all__ = ["DEFAULTS", "run_checks"]
