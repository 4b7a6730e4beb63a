# This test file verifies validation of the embedded risk datasets.
# It exists so malformed literals fail loudly at load instead of producing a misleading chart.

from __future__ import annotations

import copy
from typing import Any

import pytest
from pydantic import ValidationError

from src.risk_dashboard.risk_data import (
    EMBEDDED_DATASETS,
    RiskDatasets,
    horizon_months,
    load_risk_datasets,
)


def _raw() -> dict[str, Any]:
    return copy.deepcopy(EMBEDDED_DATASETS)


def test_embedded_datasets_validate() -> None:
    datasets = load_risk_datasets(_raw())

    assert [item.label for item in datasets.scenarios] == ["Relief", "Tighten", "StatusQuo"]
    assert len(datasets.secondary_sanctions) == 5
    assert datasets.metric("P(Tighten 1Y)").value == "55%"


def test_datasets_are_immutable() -> None:
    datasets = load_risk_datasets(_raw())

    with pytest.raises(ValidationError):
        datasets.scenarios[0].probability = 99


def test_metric_lookup_unknown_name() -> None:
    with pytest.raises(KeyError):
        load_risk_datasets(_raw()).metric("Sharpe")


@pytest.mark.parametrize(
    ("horizon", "months"), [("1m", 1), ("6m", 6), ("1y", 12), ("10y", 120)]
)
def test_horizon_months(horizon: str, months: int) -> None:
    assert horizon_months(horizon) == months


def test_horizon_months_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError):
        horizon_months("2w")


def test_out_of_range_sanction_probability_is_rejected() -> None:
    raw = _raw()
    raw["secondary_sanctions"][0]["probability"] = 120

    with pytest.raises(RuntimeError, match="Invalid embedded risk dataset"):
        load_risk_datasets(raw)


def test_negative_geo_weight_is_rejected() -> None:
    raw = _raw()
    raw["geo_exposure"][1]["weight"] = -1

    with pytest.raises(RuntimeError):
        load_risk_datasets(raw)


def test_positive_drawdown_is_rejected() -> None:
    raw = _raw()
    raw["sanction_impact"][0]["equities"] = 5

    with pytest.raises(RuntimeError):
        load_risk_datasets(raw)


def test_sanction_levels_must_be_ordered() -> None:
    raw = _raw()
    raw["sanction_impact"].reverse()

    with pytest.raises(RuntimeError, match="sanction levels"):
        load_risk_datasets(raw)


def test_timeline_must_be_chronological() -> None:
    raw = _raw()
    raw["timeline"][0], raw["timeline"][1] = raw["timeline"][1], raw["timeline"][0]

    with pytest.raises(RuntimeError, match="chronological"):
        load_risk_datasets(raw)


def test_timeline_series_keys_are_fixed() -> None:
    raw = _raw()
    raw["timeline"][0]["escalate"] = 4

    with pytest.raises(RuntimeError):
        load_risk_datasets(raw)


def test_months_must_be_in_calendar_order() -> None:
    raw = _raw()
    raw["regime_shift"][0]["month"] = "Mar"

    with pytest.raises(RuntimeError, match="calendar order"):
        load_risk_datasets(raw)


def test_bar_colors_must_be_hex_literals() -> None:
    raw = _raw()
    raw["secondary_sanctions"][0]["color"] = "blue"

    with pytest.raises(RuntimeError):
        load_risk_datasets(raw)


def test_duplicate_metric_names_are_rejected() -> None:
    raw = _raw()
    raw["risk_wall"].append(dict(raw["risk_wall"][0]))

    with pytest.raises(RuntimeError, match="risk_wall labels must be unique"):
        load_risk_datasets(raw)


def test_scenarios_need_not_sum_to_one_hundred() -> None:
    raw = _raw()
    raw["scenarios"][2]["probability"] = 40

    datasets = load_risk_datasets(raw)

    assert isinstance(datasets, RiskDatasets)
    assert sum(item.probability for item in datasets.scenarios) == 123
