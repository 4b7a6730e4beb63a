# This file is the Streamlit entrypoint for the geopolitical risk dashboard.
# It mounts the prebuilt dashboard tree as one full-page view with no inputs and no callbacks.
# Panels flow through the two-column grid plan; the Risk Wall always takes a full row.

from __future__ import annotations

import logging

import streamlit as st

from src.common.logging import configure_logging
from src.risk_dashboard.components.risk_wall import RiskWall
from src.risk_dashboard.dashboard import Dashboard, Panel, build_dashboard
from src.risk_dashboard.layout import WIDE_TIER, plan_grid
from src.risk_dashboard.theme import card_container_key
from src.risk_dashboard.ui_text import APP_TITLE

logger = logging.getLogger(__name__)


@st.cache_resource
def get_dashboard() -> Dashboard:
    return build_dashboard()


def render_panel(panel: Panel) -> None:
    with st.container(key=card_container_key(panel.key, panel.card_style)):
        st.subheader(panel.title, help=panel.help_text)
        if panel.description:
            st.caption(panel.description)
        if isinstance(panel.body, RiskWall):
            st.markdown(panel.body.html, unsafe_allow_html=True)
        else:
            st.altair_chart(panel.body, use_container_width=True, theme=None)


def render_dashboard(dashboard: Dashboard) -> None:
    st.markdown(f"<style>{dashboard.css}</style>", unsafe_allow_html=True)
    st.title(dashboard.title)
    st.caption(dashboard.subtitle)

    rows = plan_grid(dashboard.panels, columns=WIDE_TIER.panel_columns)
    for row in rows:
        if row.full_width:
            render_panel(row.panels[0])
            continue
        columns = st.columns(WIDE_TIER.panel_columns, gap="large")
        for column, panel in zip(columns, row.panels):
            with column:
                render_panel(panel)
    logger.debug("Mounted %d panels in %d grid rows", len(dashboard.panels), len(rows))


def main() -> None:
    st.set_page_config(page_title=APP_TITLE, layout="wide")
    configure_logging()
    render_dashboard(get_dashboard())


if __name__ == "__main__":
    main()
