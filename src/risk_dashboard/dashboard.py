# This file composes the whole dashboard: every dataset bound to its chart type, in page order.
# `build_dashboard` returns an immutable tree of panels that Streamlit mounts without further decisions.
# Panels only differ in their body, card style, and whether they span the full grid width.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import altair as alt

from src.risk_dashboard.components.charts import (
    build_colored_bars,
    build_series_lines,
    build_share_pie,
)
from src.risk_dashboard.components.risk_wall import RiskWall, build_risk_wall
from src.risk_dashboard.dashboard_config import DashboardConfig, load_dashboard_config
from src.risk_dashboard.data_access import RiskDataAccess
from src.risk_dashboard.theme import (
    GEO_PALETTE,
    REGIME_SHIFT_COLORS,
    SANCTION_IMPACT_COLORS,
    SCENARIO_PALETTE,
    TIMELINE_COLORS,
    CardStyle,
    build_page_css,
)
from src.risk_dashboard.tooltips import TOOLTIPS
from src.risk_dashboard.ui_text import APP_SUBTITLE, APP_TITLE, PANEL_DESCRIPTIONS, PANEL_TITLES

logger = logging.getLogger(__name__)

PanelBody = Union[alt.Chart, alt.LayerChart, RiskWall]


@dataclass(frozen=True)
class Panel:
    key: str
    title: str
    help_text: str
    body: PanelBody
    description: str | None = None
    card_style: CardStyle = "filled"
    full_width: bool = False
    fade_in: bool = False


@dataclass(frozen=True)
class Dashboard:
    title: str
    subtitle: str
    panels: tuple[Panel, ...]
    css: str

    def panel(self, key: str) -> Panel:
        for panel in self.panels:
            if panel.key == key:
                return panel
        raise KeyError(key)


def _panel(key: str, body: PanelBody, **options: object) -> Panel:
    return Panel(
        key=key,
        title=PANEL_TITLES[key],
        help_text=TOOLTIPS[key],
        body=body,
        description=PANEL_DESCRIPTIONS.get(key),
        **options,
    )


def build_panels(data_access: RiskDataAccess, config: DashboardConfig) -> tuple[Panel, ...]:
    height = config.clamp_chart_height()
    return (
        _panel(
            "scenario_distribution",
            build_share_pie(
                data_access.scenario_shares(),
                palette=SCENARIO_PALETTE,
                height=height,
                outer_radius=config.pie_outer_radius,
                name_title="Scenario",
                value_title="Probability (%)",
            ),
            fade_in=True,
        ),
        _panel(
            "probability_timeline",
            build_series_lines(
                data_access.timeline_series(),
                x_field="horizon",
                x_title="Horizon",
                y_title="Probability (%)",
                colors=TIMELINE_COLORS,
                height=height,
                point_markers=True,
            ),
        ),
        _panel(
            "geo_risk_exposure",
            build_share_pie(
                data_access.geo_shares(),
                palette=GEO_PALETTE,
                height=height,
                outer_radius=config.pie_outer_radius,
                name_title="Location",
                value_title="Weight",
            ),
        ),
        _panel(
            "asset_reaction",
            build_series_lines(
                data_access.sanction_impact_series(),
                x_field="level",
                x_title="Sanction intensity",
                y_title="Expected drawdown (%)",
                colors=SANCTION_IMPACT_COLORS,
                height=height,
                point_markers=False,
            ),
        ),
        _panel(
            "risk_wall",
            build_risk_wall(data_access.risk_wall_metrics()),
            card_style="outlined",
            full_width=True,
        ),
        _panel(
            "monthly_regime_shift",
            build_series_lines(
                data_access.regime_shift_series(),
                x_field="month",
                x_title="Month",
                y_title="Change (pp)",
                colors=REGIME_SHIFT_COLORS,
                height=height,
                point_markers=True,
            ),
        ),
        _panel(
            "secondary_sanctions",
            build_colored_bars(
                data_access.secondary_sanctions(),
                x_field="entity",
                y_field="probability",
                color_field="color",
                x_title="Jurisdiction",
                y_title="Probability (%)",
                height=height,
            ),
        ),
    )


def build_dashboard(
    *,
    config: DashboardConfig | None = None,
    data_access: RiskDataAccess | None = None,
) -> Dashboard:
    """Build the full dashboard tree from the embedded datasets."""

    config = config or load_dashboard_config()
    data_access = data_access or RiskDataAccess()

    panels = build_panels(data_access, config)
    css = build_page_css(
        panels,
        fade_in_seconds=config.fade_in_seconds if config.enable_fade_in else None,
    )
    logger.info("Built risk dashboard with %d panels", len(panels))
    return Dashboard(title=APP_TITLE, subtitle=APP_SUBTITLE, panels=panels, css=css)
