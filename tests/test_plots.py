# -*- coding: utf-8 -*-
# PolyTopo/tests/test_plots.py

import numpy as np
import pytest

from polymesh.core.polygon_mesh import PolygonMesh
from polymesh.stats.data.reader import from_faces

pytest.importorskip("matplotlib")


@pytest.fixture(autouse=True)
def _headless(monkeypatch):
    monkeypatch.delenv("DISPLAY", raising=False)


@pytest.fixture
def close_figures():
    import matplotlib.pyplot as plt
    yield
    plt.close("all")


@pytest.mark.usefixtures("close_figures")
@pytest.mark.parametrize("name", [
    "plot_edge_classification",
    "plot_vertex_classification",
    "plot_valence_hist",
    "plot_face_size_hist",
])
def test_stats_plots_save(tmp_path, triple_edge, name):
    from post import plot_stats

    out = tmp_path / "{}.png".format(name)
    fig = getattr(plot_stats, name)(PolygonMesh(*triple_edge), save_path=str(out))
    assert out.exists()
    assert fig.axes[0].get_title()


@pytest.mark.usefixtures("close_figures")
def test_edge_bars_values(triple_edge):
    from post.plot_stats import plot_edge_classification

    fig = plot_edge_classification(triple_edge)
    heights = [p.get_height() for p in fig.axes[0].patches]
    assert heights == [6, 0, 1, 0]


@pytest.mark.usefixtures("close_figures")
def test_classified_edges(tmp_path):
    from post.plot_mesh import plot_classified_edges

    pts = np.array([[x, 0.0, z] for z in (0.0, 1.0) for x in (0.0, 1.0, 2.0)])
    data = from_faces([[0, 1, 4, 3], [1, 2, 5, 4]], points=pts, name="strip", compact=True)
    out = tmp_path / "edges.png"
    fig = plot_classified_edges(data, save_path=str(out), axes=(0, 2))
    assert out.exists()
    labels = [t.get_text() for t in fig.axes[0].get_legend().get_texts()]
    assert labels == ["regular (1)", "boundary (6)"]


def test_classified_edges_needs_points(bowtie):
    from post.plot_mesh import plot_classified_edges

    with pytest.raises(ValueError):
        plot_classified_edges(bowtie)
