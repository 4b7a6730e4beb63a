# This file shapes the embedded risk datasets into pandas frames the chart builders consume.
# Pie inputs carry precomputed share labels; line inputs are melted to one row per (x, series) point.
# Row order always follows dataset order so axes and slices stay in their declared sequence.

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from src.risk_dashboard.formatting import share_labels, share_percentages
from src.risk_dashboard.risk_data import (
    RiskDatasets,
    RiskMetric,
    SanctionImpactLevel,
    TimelinePoint,
    get_risk_datasets,
)


def _share_frame(names: Sequence[str], values: Sequence[float]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "position": range(len(names)),
            "name": list(names),
            "value": [float(value) for value in values],
            "share": share_percentages(values),
            "label": share_labels(names, values),
        }
    )


def _series_frame(
    records: list[dict[str, object]],
    *,
    x_field: str,
    series: dict[str, str],
) -> pd.DataFrame:
    wide = pd.DataFrame(records)
    wide["x_position"] = range(len(wide))
    long = wide.melt(
        id_vars=[x_field, "x_position"],
        value_vars=list(series.keys()),
        var_name="series",
        value_name="value",
    )
    long["series"] = long["series"].map(series)
    return long.sort_values(["x_position", "series"], kind="stable").reset_index(drop=True)


class RiskDataAccess:
    def __init__(self, datasets: RiskDatasets | None = None) -> None:
        self.datasets = datasets if datasets is not None else get_risk_datasets()

    def scenario_shares(self) -> pd.DataFrame:
        scenarios = self.datasets.scenarios
        return _share_frame(
            [item.label for item in scenarios], [item.probability for item in scenarios]
        )

    def geo_shares(self) -> pd.DataFrame:
        exposure = self.datasets.geo_exposure
        return _share_frame(
            [item.location for item in exposure], [item.weight for item in exposure]
        )

    def timeline_series(self) -> pd.DataFrame:
        return _series_frame(
            [point.model_dump() for point in self.datasets.timeline],
            x_field="horizon",
            series=TimelinePoint.SERIES,
        )

    def sanction_impact_series(self) -> pd.DataFrame:
        return _series_frame(
            [level.model_dump() for level in self.datasets.sanction_impact],
            x_field="level",
            series=SanctionImpactLevel.SERIES,
        )

    def regime_shift_series(self) -> pd.DataFrame:
        return _series_frame(
            [shift.model_dump() for shift in self.datasets.regime_shift],
            x_field="month",
            series={"change": "change"},
        )

    def secondary_sanctions(self) -> pd.DataFrame:
        return pd.DataFrame(
            [item.model_dump() for item in self.datasets.secondary_sanctions],
            columns=["entity", "probability", "color"],
        )

    def risk_wall_metrics(self) -> tuple[RiskMetric, ...]:
        return self.datasets.risk_wall
