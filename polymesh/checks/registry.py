# -*- coding: utf-8 -*-
# PolyTopo/polymesh/checks/registry.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/16/2025

Purpose:
--------
Central registry of topology rules. Each rule is defined once here with its metadata
(id, function, severity, fixability), giving a single source of truth for execution
order and selection.

Main Tasks:
-----------
   - Bind rule functions from `errors.py` and `warnings.py` into `RuleSpec` objects.
   - Populate `REGISTRY` (id -> spec) and `RULES_ORDER` (deterministic ordering).
   - Provide severity lists and a filter for enabling/disabling.

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - Severity is constrained to {"error", "warn"}.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from . import errors as _err
from . import warnings as _wrn


# ---- Rule spec ----

@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(mv, thresholds_dict, cache_dict) -> finding_dict
    severity: str  # "error" | "warn"
    fixable: bool = True


# ---- Build registry ----

REGISTRY: Dict[str, RuleSpec] = {}

def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    if spec.severity not in ("error", "warn"):
        raise ValueError(f"Invalid severity for {spec.id}: {spec.severity}")
    REGISTRY[spec.id] = spec


# Errors (not a consistently oriented 2-manifold)
_add(RuleSpec("singular_edges",           _err.singular_edges,           "error", False))
_add(RuleSpec("singular_vertices",        _err.singular_vertices,        "error", True))
_add(RuleSpec("inconsistent_orientation", _err.inconsistent_orientation, "error", True))
_add(RuleSpec("degenerate_edges",         _err.degenerate_edges,         "error", True))

# Warnings (advisories)
_add(RuleSpec("boundary_edges",      _wrn.boundary_edges,      "warn", True))
_add(RuleSpec("non_triangle_faces",  _wrn.non_triangle_faces,  "warn", True))
_add(RuleSpec("multiple_components", _wrn.multiple_components, "warn", False))


# ---- Deterministic execution order ----
# Edges first, then vertices (vertex parts depend on edge classes), then orientation.
RULES_ORDER: List[str] = [
    "degenerate_edges",
    "singular_edges",
    "singular_vertices",
    "inconsistent_orientation",
    "boundary_edges",
    "non_triangle_faces",
    "multiple_components",
]


# ---- Convenience: severity lists ----

SEVERITY = {
    "error": [rid for rid, spec in REGISTRY.items() if spec.severity == "error"],
    "warn":  [rid for rid, spec in REGISTRY.items() if spec.severity == "warn"],
}


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Filter RULES_ORDER by an enable/disable map (absent ids default to enabled).
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]
