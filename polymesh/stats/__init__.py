# -*- coding: utf-8 -*-
# PolyTopo/polymesh/stats/__init__.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/16/2025

Modules:
--------
- report:    one-shot orchestration to produce a JSON-like topology summary.
- export:    saving summaries to CSV / JSON / Excel.
"""

__all__ = ["report", "export"]
