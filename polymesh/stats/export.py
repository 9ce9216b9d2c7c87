# -*- coding: utf-8 -*-
# PolyTopo/polymesh/stats/export.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/16/2025

Purpose:
--------
Write topology summaries (nested dictionaries from `report.summarize` or `checks.run_checks`)
to CSV, JSON or Excel. Nested keys are flattened into "dot.path.key" rows for the tabular
formats; numpy scalars and arrays are converted to plain JSON values.

Main Tasks:
-----------
    1. Flatten nested dictionaries into (key_path, value) rows.
    2. Export as:
        - CSV: 2-column "key,value" table.
        - JSON: indented JSON (numpy-safe).
        - Excel: single-sheet file (requires pandas).
"""

import csv
import json
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


# ------------------------------
# Internal helpers
# ------------------------------
def _is_scalar(x: Any) -> bool:
    return isinstance(x, (str, bool, int, float, np.generic)) or x is None


def _json_default(o: Any) -> Any:
    """json.dumps hook: numpy scalars -> Python scalars, arrays -> lists, rest -> str."""
    if isinstance(o, np.generic):
        return o.item()
    if isinstance(o, np.ndarray):
        return o.tolist()
    return str(o)


def _to_json_str(x: Any) -> str:
    return json.dumps(x, default=_json_default, ensure_ascii=False)


def _flatten(prefix: str, obj: Any, out: List[Tuple[str, Any]]) -> None:
    """
    Recursively flatten nested dicts into (key_path, value) rows.

    Scalars are kept as-is (numpy scalars unwrapped), dicts recurse over sorted keys,
    anything else (lists, tuples, arrays) is stored as a JSON string.
    """
    if _is_scalar(obj):
        out.append((prefix, obj.item() if isinstance(obj, np.generic) else obj))
        return

    if isinstance(obj, dict):
        for k in sorted(obj.keys(), key=str):
            key = str(k)
            _flatten(key if prefix == "" else "{}.{}".format(prefix, key), obj[k], out)
        return

    out.append((prefix, _to_json_str(obj)))


def _ensure_folder(path: str) -> None:
    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


# ------------------------------
# Public API: Writers
# ------------------------------
def flatten_summary(summary: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """Flattened (key, value) rows of a nested summary."""
    rows: List[Tuple[str, Any]] = []
    _flatten("", summary, rows)
    return rows


def write_summary_csv(summary: Dict[str, Any], path: str) -> str:
    """
    Write a summary dictionary to a 2-column CSV file ("key,value").

    Returns
    -------
    str
        Written file path.
    """
    rows = flatten_summary(summary)
    _ensure_folder(path)

    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["key", "value"])
        for k, v in rows:
            w.writerow([k, v])

    logger.info("[export] CSV summary written to %s (%d rows)", path, len(rows))
    return path


def write_summary_json(summary: Dict[str, Any], path: str, indent: int = 2) -> str:
    """
    Write a summary dictionary to a JSON file.

    Returns
    -------
    str
        Written file path.
    """
    _ensure_folder(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=indent, ensure_ascii=False, default=_json_default)

    logger.info("[export] JSON summary written to %s", path)
    return path


def write_summary_excel(summary: Dict[str, Any], path: str) -> Optional[str]:
    """
    Write a summary dictionary to a single-sheet Excel file.

    Requires `pandas` (and an Excel engine such as openpyxl). If pandas is unavailable,
    returns None.
    """
    try:
        import pandas as pd
    except ImportError:
        logger.debug("[export] pandas not installed; skipping Excel export.")
        return None

    df = pd.DataFrame(flatten_summary(summary), columns=["key", "value"])
    _ensure_folder(path)
    df.to_excel(path, index=False)
    logger.info("[export] Excel summary written to %s", path)
    return path
