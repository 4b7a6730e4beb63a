# This file defines presentation settings for the risk dashboard.
# It exists so chart sizing and the fade-in animation can be tuned through environment variables.
# Keeping these values centralized avoids hard-coded sizes scattered across chart builders.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

MIN_CHART_HEIGHT = 160
MAX_CHART_HEIGHT = 800

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class DashboardConfig:
    chart_height: int = 300
    pie_outer_radius: int = 110
    enable_fade_in: bool = True
    fade_in_seconds: float = 0.6

    def clamp_chart_height(self, requested_height: int | None = None) -> int:
        if requested_height is None:
            requested_height = self.chart_height
        return max(MIN_CHART_HEIGHT, min(int(requested_height), MAX_CHART_HEIGHT))


def load_dashboard_config(*, load_env: bool = True) -> DashboardConfig:
    if load_env:
        load_dotenv()

    return DashboardConfig(
        chart_height=int(os.getenv("DASHBOARD_CHART_HEIGHT", "300")),
        pie_outer_radius=int(os.getenv("DASHBOARD_PIE_OUTER_RADIUS", "110")),
        enable_fade_in=os.getenv("DASHBOARD_ENABLE_FADE_IN", "true").strip().lower() in _TRUTHY,
        fade_in_seconds=float(os.getenv("DASHBOARD_FADE_IN_SECONDS", "0.6")),
    )
