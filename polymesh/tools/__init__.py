# -*- coding: utf-8 -*-
# PolyTopo/polymesh/tools/__init__.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/15/2025

Tools Subpackage:
-----------------
Helpers around the core: corner-array conversions and exportability checks.

Modules:
--------
- utils:    faces <-> corner array conversions.

- validate: requirements of strict triangle-only output formats.
"""

__all__ = ["utils", "validate"]
