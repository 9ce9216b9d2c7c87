# -*- coding: utf-8 -*-
# PolyTopo/polymesh/core/errors.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/12/2025

Purpose
-------
Typed exceptions for mesh construction. Construction either completes or fails with one
of these; query methods never raise and return -1 / False instead.

Main Tasks
----------
    1. Define TopologyError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: VertexCountError, IndexRangeError, FaceSizeError, ExportError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- These errors describe malformed input data; there is nothing to retry.
"""

__all__ = [
    "TopologyError",
    "VertexCountError",
    "IndexRangeError",
    "FaceSizeError",
    "ExportError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class TopologyError(Exception):
    """
    Base class for all errors raised while building or exporting a polygon mesh.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"corner": 7, "value": 12}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class VertexCountError(TopologyError):
    """
    The number of distinct vertex indices in the corner array differs from the
    declared vertex count.
    """


class IndexRangeError(TopologyError):
    """
    A corner value lies outside [-1, n_vertices), or a graph endpoint lies outside
    [0, n_vertices).
    """


class FaceSizeError(TopologyError):
    """
    A face has fewer than 3 corners, or the corner array ends without a closing sentinel.
    """


class ExportError(TopologyError):
    """
    The mesh does not meet the requirements of a strict output format
    (e.g., triangles only, closed, consistently oriented).
    """
