# This file contains the chart builders behind every charted dashboard panel.
# Builders return Altair charts instead of drawing them, so the page tree can be inspected before Streamlit mounts it.
# Each chart gets a tooltip encoding and the shared dark theme; line charts also get a series legend.

from __future__ import annotations

from collections.abc import Mapping, Sequence

import altair as alt
import pandas as pd

from src.risk_dashboard.formatting import PERCENT_LABEL_EXPR
from src.risk_dashboard.theme import (
    LINE_STROKE_WIDTH,
    apply_chart_theme,
    palette_by_position,
)

PIE_LABEL_OFFSET = 28


def build_share_pie(
    dataframe: pd.DataFrame,
    *,
    palette: Sequence[str],
    height: int,
    outer_radius: int,
    name_title: str,
    value_title: str,
) -> alt.LayerChart:
    """Pie chart whose slices are labelled `Name NN%` from the frame's `label` column."""

    names = dataframe["name"].tolist()
    base = alt.Chart(dataframe).encode(
        theta=alt.Theta("value:Q", stack=True),
        order=alt.Order("position:Q"),
        color=alt.Color(
            "name:N",
            scale=alt.Scale(domain=names, range=palette_by_position(palette, len(names))),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("name:N", title=name_title),
            alt.Tooltip("value:Q", title=value_title),
            alt.Tooltip("share:Q", title="Share (%)"),
        ],
    )
    arcs = base.mark_arc(outerRadius=outer_radius)
    labels = base.mark_text(radius=outer_radius + PIE_LABEL_OFFSET).encode(
        text="label:N"
    )
    return apply_chart_theme((arcs + labels).properties(height=height))


def build_series_lines(
    dataframe: pd.DataFrame,
    *,
    x_field: str,
    x_title: str,
    y_title: str,
    colors: Mapping[str, str],
    height: int,
    point_markers: bool,
) -> alt.Chart:
    """One line per `series` value, colored from `colors` and listed in the legend."""

    x_order = list(dict.fromkeys(dataframe[x_field].tolist()))
    point = alt.OverlayMarkDef(filled=True, size=60) if point_markers else False
    chart = (
        alt.Chart(dataframe)
        .mark_line(point=point, strokeWidth=LINE_STROKE_WIDTH, interpolate="monotone")
        .encode(
            x=alt.X(f"{x_field}:N", sort=x_order, title=x_title, axis=alt.Axis(labelAngle=0)),
            y=alt.Y("value:Q", title=y_title, axis=alt.Axis(labelExpr=PERCENT_LABEL_EXPR)),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(domain=list(colors.keys()), range=list(colors.values())),
                legend=alt.Legend(title=None, orient="bottom"),
            ),
            tooltip=[
                alt.Tooltip(f"{x_field}:N", title=x_title),
                alt.Tooltip("series:N", title="Series"),
                alt.Tooltip("value:Q", title=y_title),
            ],
        )
        .properties(height=height)
    )
    return apply_chart_theme(chart)


def build_colored_bars(
    dataframe: pd.DataFrame,
    *,
    x_field: str,
    y_field: str,
    color_field: str,
    x_title: str,
    y_title: str,
    height: int,
) -> alt.Chart:
    """Bar chart where each bar is filled with the literal color stored on its row."""

    x_order = dataframe[x_field].tolist()
    chart = (
        alt.Chart(dataframe)
        .mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4)
        .encode(
            x=alt.X(f"{x_field}:N", sort=x_order, title=x_title, axis=alt.Axis(labelAngle=0)),
            y=alt.Y(f"{y_field}:Q", title=y_title, axis=alt.Axis(labelExpr=PERCENT_LABEL_EXPR)),
            color=alt.Color(f"{color_field}:N", scale=None, legend=None),
            tooltip=[
                alt.Tooltip(f"{x_field}:N", title=x_title),
                alt.Tooltip(f"{y_field}:Q", title=y_title),
            ],
        )
        .properties(height=height)
    )
    return apply_chart_theme(chart)
