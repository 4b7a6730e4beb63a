# This file stores copy for the page header, panel titles, and panel descriptions.
# Centralizing text keeps wording reviews away from rendering logic.

from __future__ import annotations

APP_TITLE = "Geopolitical Risk Scenarios"
APP_SUBTITLE = (
    "Illustrative regime probabilities, timelines, geographic exposure, and sanctions impact."
)

PANEL_TITLES: dict[str, str] = {
    "scenario_distribution": "Scenario Distribution (1Y)",
    "probability_timeline": "Probability Timeline",
    "geo_risk_exposure": "Geo Risk Exposure",
    "asset_reaction": "Asset Reaction Under Sanctions Escalation",
    "risk_wall": "Risk Wall",
    "monthly_regime_shift": "Monthly Increase in Tighten Risk (percentage points)",
    "secondary_sanctions": "Secondary Sanctions Risk (1Y Probability %)",
}

PANEL_DESCRIPTIONS: dict[str, str] = {
    "asset_reaction": (
        "X-axis = sanction intensity (Low / Medium / High). Y-axis = expected drawdown in percent. "
        "If escalation increases, equities fall more than real estate."
    ),
    "monthly_regime_shift": (
        "Shows how many percentage points Tighten probability increased each month."
    ),
    "secondary_sanctions": (
        "Probability of secondary sanctions impact by jurisdiction. "
        "Higher bar = higher exposure risk."
    ),
}
