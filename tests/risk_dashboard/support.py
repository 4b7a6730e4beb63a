# This file provides shared helpers for inspecting dashboard charts in tests.
# Charts are compared through their Vega-Lite dictionaries so no Streamlit server is needed.

from __future__ import annotations

from typing import Any

import altair as alt


def chart_spec(chart: alt.Chart | alt.LayerChart) -> dict[str, Any]:
    return chart.to_dict()


def chart_records(chart: alt.Chart | alt.LayerChart) -> list[dict[str, Any]]:
    """Return the single inline dataset a chart was built from."""

    spec = chart_spec(chart)
    datasets = spec.get("datasets")
    if datasets:
        assert len(datasets) == 1
        return next(iter(datasets.values()))
    return spec["data"]["values"]


def chart_encodings(chart: alt.Chart | alt.LayerChart) -> list[dict[str, Any]]:
    """Encodings of a plain chart, or of every layer of a layered chart."""

    spec = chart_spec(chart)
    if "layer" in spec:
        return [layer["encoding"] for layer in spec["layer"]]
    return [spec["encoding"]]


def chart_marks(chart: alt.Chart | alt.LayerChart) -> list[dict[str, Any]]:
    spec = chart_spec(chart)
    layers = spec["layer"] if "layer" in spec else [spec]
    marks = []
    for layer in layers:
        mark = layer["mark"]
        marks.append(mark if isinstance(mark, dict) else {"type": mark})
    return marks
