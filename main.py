# -*- coding: utf-8 -*-
# PolyTopo/main.py

"""
End-to-end driver:
  1) Load a surface mesh (path from the command line) or build a demo cube
  2) Build the classified half-edge mesh
  3) Topology summary + CSV/JSON/Excel export
  4) Classification plots
  5) Rule checks (hard stop on errors)

Usage:
  python main.py [mesh_file] [out_dir]
"""

import os
import json
import logging
import sys
from pathlib import Path

import numpy as np

from polymesh.api import build_polygon_mesh
from polymesh.checks import run_checks
from polymesh.stats.data.reader import read, from_faces
from polymesh.stats.report import summarize
from polymesh.stats.export import write_summary_csv, write_summary_json, write_summary_excel
from post.plot_stats import (
    plot_edge_classification,
    plot_vertex_classification,
    plot_valence_hist,
    plot_face_size_hist,
)
from post.plot_mesh import plot_classified_edges


def _demo_cube():
    pts = np.array([
        [0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0],
        [0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 1, 1],
    ], dtype=float)
    quads = [
        [0, 3, 2, 1], [4, 5, 6, 7],
        [0, 1, 5, 4], [1, 2, 6, 5],
        [2, 3, 7, 6], [3, 0, 4, 7],
    ]
    return from_faces(quads, points=pts, name="cube")


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("PolyTopo")

    mesh_path = sys.argv[1] if len(sys.argv) > 1 else None
    out_dir = sys.argv[2] if len(sys.argv) > 2 else "out"
    os.makedirs(os.path.join(out_dir, "plots"), exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Load mesh
    # ------------------------------------------------------------------
    data = read(mesh_path) if mesh_path else _demo_cube()
    log.info("Loaded %r", data)

    # ------------------------------------------------------------------
    # 2) Half-edge mesh + classification
    # ------------------------------------------------------------------
    pm = build_polygon_mesh(data.n_vertices, data.coord_index)

    # ------------------------------------------------------------------
    # 3) Summary + export
    # ------------------------------------------------------------------
    summary = summarize(pm)
    log.info("Topology: %s", summary["topology"])

    csv_path = write_summary_csv(summary, os.path.join(out_dir, "summary.csv"))
    json_path = write_summary_json(summary, os.path.join(out_dir, "summary.json"))
    xlsx_path = write_summary_excel(summary, os.path.join(out_dir, "summary.xlsx"))

    print("Stats written:")
    print(" - CSV :", csv_path)
    print(" - JSON:", json_path)
    print(" - XLSX:", xlsx_path if xlsx_path else "(pandas not installed)")

    # ------------------------------------------------------------------
    # 4) Plots
    # ------------------------------------------------------------------
    plots = os.path.join(out_dir, "plots")
    plot_edge_classification(pm, save_path=os.path.join(plots, "edges.png"))
    plot_vertex_classification(pm, save_path=os.path.join(plots, "vertices.png"))
    plot_valence_hist(pm, save_path=os.path.join(plots, "valence.png"))
    plot_face_size_hist(pm, save_path=os.path.join(plots, "face_sizes.png"))
    if data.points is not None:
        plot_classified_edges(data, save_path=os.path.join(plots, "edge_classes.png"))

    # ------------------------------------------------------------------
    # 5) Checks (hard stop on errors)
    # ------------------------------------------------------------------
    CHECKS_CONFIG = None  # or e.g. {"enabled": {"non_triangle_faces": True}}

    findings = run_checks(data, CHECKS_CONFIG)

    report_path = Path(out_dir) / "{}.checks.json".format(data.name or "mesh")
    report_path.write_text(json.dumps(findings, indent=2, default=str))

    if not findings["ok"]:
        failures = []
        for rid, f in findings["rules"].items():
            if f.get("severity") == "error" and not f.get("ok", True):
                failures.append((rid, int(f.get("count", 0)), f.get("examples", [])[:3]))

        lines = [
            "Topology checks failed. The following error checks did not pass:",
            *(f"  - {rid}: count={cnt}"
              + (f", examples={examples}" if examples else "")
              for rid, cnt, examples in failures),
            f"See full report: {report_path}",
        ]
        print("\n".join(lines), file=sys.stderr)
        sys.exit(1)

    print(f"Topology checks passed. Report: {report_path}")
