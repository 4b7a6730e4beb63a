# This file defines the help text shown next to each panel title.
# A single dictionary keeps explanations consistent between the page and tests.

from __future__ import annotations

TOOLTIPS: dict[str, str] = {
    "scenario_distribution": "One-year probability of each macro regime; slices show each regime's share of the total.",
    "probability_timeline": "Probability of the Relief and Tighten regimes at each horizon, from one month to ten years.",
    "geo_risk_exposure": "Relative weight of exposure by location; slices show each location's share of total weight.",
    "asset_reaction": "Expected drawdown for equities and real estate as sanction intensity rises.",
    "risk_wall": "Headline risk figures. VaR, CVaR, drawdown and time to relief are illustrative values.",
    "monthly_regime_shift": "Month-by-month increase in Tighten probability, in percentage points.",
    "secondary_sanctions": "One-year probability that secondary sanctions reach each jurisdiction.",
}
