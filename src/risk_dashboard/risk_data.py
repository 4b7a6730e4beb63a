# This file holds the illustrative risk datasets shown on the dashboard.
# The values are precomputed literals; nothing here fetches or derives statistics.
# Each dataset is validated once per process into frozen pydantic models so panels only read well-formed data.

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Any, ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)

HEX_COLOR: Final[str] = r"^#[0-9A-Fa-f]{6}$"
SANCTION_LEVELS: Final[tuple[str, ...]] = ("Low", "Medium", "High")
MONTHS: Final[tuple[str, ...]] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_HORIZON_PATTERN = re.compile(r"^(\d+)([my])$")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ScenarioSlice(_Frozen):
    label: str
    probability: float = Field(ge=0)


class TimelinePoint(_Frozen):
    SERIES: ClassVar[dict[str, str]] = {"relief": "Relief", "tighten": "Tighten"}

    horizon: str
    relief: float = Field(ge=0, le=100)
    tighten: float = Field(ge=0, le=100)


class GeoExposure(_Frozen):
    location: str
    weight: float = Field(ge=0)


class SanctionImpactLevel(_Frozen):
    SERIES: ClassVar[dict[str, str]] = {"equities": "Equities", "real_estate": "RealEstate"}

    level: str
    equities: float = Field(le=0)
    real_estate: float = Field(le=0)


class RegimeShift(_Frozen):
    month: str
    change: float


class SecondarySanctionRisk(_Frozen):
    entity: str
    probability: float = Field(ge=0, le=100)
    color: str = Field(pattern=HEX_COLOR)


class RiskMetric(_Frozen):
    name: str
    value: str
    color: str = Field(pattern=HEX_COLOR)


def horizon_months(horizon: str) -> int:
    """Convert a horizon label such as `3m` or `10y` to months."""

    match = _HORIZON_PATTERN.match(horizon)
    if match is None:
        raise ValueError(f"unrecognized horizon label {horizon!r}")
    count, unit = int(match.group(1)), match.group(2)
    return count * 12 if unit == "y" else count


class RiskDatasets(_Frozen):
    """Every dataset the dashboard renders, in display order."""

    scenarios: tuple[ScenarioSlice, ...] = Field(min_length=1)
    timeline: tuple[TimelinePoint, ...] = Field(min_length=1)
    geo_exposure: tuple[GeoExposure, ...] = Field(min_length=1)
    sanction_impact: tuple[SanctionImpactLevel, ...]
    regime_shift: tuple[RegimeShift, ...] = Field(min_length=1)
    secondary_sanctions: tuple[SecondarySanctionRisk, ...] = Field(min_length=1)
    risk_wall: tuple[RiskMetric, ...] = Field(min_length=1)

    @field_validator("timeline")
    @classmethod
    def _chronological_horizons(
        cls, value: tuple[TimelinePoint, ...]
    ) -> tuple[TimelinePoint, ...]:
        months = [horizon_months(point.horizon) for point in value]
        if any(later <= earlier for earlier, later in zip(months, months[1:])):
            raise ValueError("timeline horizons must be strictly chronological")
        return value

    @field_validator("sanction_impact")
    @classmethod
    def _ordered_levels(
        cls, value: tuple[SanctionImpactLevel, ...]
    ) -> tuple[SanctionImpactLevel, ...]:
        levels = tuple(item.level for item in value)
        if levels != SANCTION_LEVELS:
            raise ValueError(f"sanction levels must be {', '.join(SANCTION_LEVELS)}")
        return value

    @field_validator("regime_shift")
    @classmethod
    def _calendar_months(cls, value: tuple[RegimeShift, ...]) -> tuple[RegimeShift, ...]:
        unknown = [item.month for item in value if item.month not in MONTHS]
        if unknown:
            raise ValueError(f"unknown month labels: {', '.join(unknown)}")
        positions = [MONTHS.index(item.month) for item in value]
        if positions != sorted(set(positions)):
            raise ValueError("monthly shifts must be in calendar order")
        return value

    @model_validator(mode="after")
    def _unique_labels(self) -> RiskDatasets:
        for name, labels in (
            ("scenarios", [item.label for item in self.scenarios]),
            ("geo_exposure", [item.location for item in self.geo_exposure]),
            ("secondary_sanctions", [item.entity for item in self.secondary_sanctions]),
            ("risk_wall", [item.name for item in self.risk_wall]),
        ):
            if len(labels) != len(set(labels)):
                raise ValueError(f"{name} labels must be unique")
        return self

    def metric(self, name: str) -> RiskMetric:
        for item in self.risk_wall:
            if item.name == name:
                return item
        raise KeyError(name)


EMBEDDED_DATASETS: Final[dict[str, Any]] = {
    "scenarios": [
        {"label": "Relief", "probability": 28},
        {"label": "Tighten", "probability": 55},
        {"label": "StatusQuo", "probability": 17},
    ],
    "timeline": [
        {"horizon": "1m", "relief": 3, "tighten": 11},
        {"horizon": "3m", "relief": 7, "tighten": 24},
        {"horizon": "6m", "relief": 14, "tighten": 38},
        {"horizon": "1y", "relief": 28, "tighten": 55},
        {"horizon": "3y", "relief": 46, "tighten": 41},
        {"horizon": "5y", "relief": 58, "tighten": 31},
        {"horizon": "10y", "relief": 72, "tighten": 18},
    ],
    "geo_exposure": [
        {"location": "Moscow", "weight": 25},
        {"location": "Ekaterinburg", "weight": 45},
        {"location": "UAE", "weight": 10},
        {"location": "Thailand", "weight": 10},
        {"location": "Bali", "weight": 10},
    ],
    "sanction_impact": [
        {"level": "Low", "equities": -5, "real_estate": -2},
        {"level": "Medium", "equities": -15, "real_estate": -8},
        {"level": "High", "equities": -30, "real_estate": -18},
    ],
    # Month-over-month rise in Tighten probability, percentage points.
    "regime_shift": [
        {"month": "Jan", "change": 1.2},
        {"month": "Feb", "change": 2.1},
        {"month": "Mar", "change": 3.4},
        {"month": "Apr", "change": 4.8},
        {"month": "May", "change": 5.2},
        {"month": "Jun", "change": 5.8},
        {"month": "Jul", "change": 6.1},
        {"month": "Aug", "change": 6.4},
        {"month": "Sep", "change": 6.8},
        {"month": "Oct", "change": 7.1},
        {"month": "Nov", "change": 7.5},
        {"month": "Dec", "change": 7.9},
    ],
    "secondary_sanctions": [
        {"entity": "Moscow", "probability": 65, "color": "#0072CE"},
        {"entity": "Ekaterinburg", "probability": 60, "color": "#00A65A"},
        {"entity": "Bali", "probability": 15, "color": "#F59E0B"},
        {"entity": "Thailand", "probability": 25, "color": "#6B7280"},
        {"entity": "UAE", "probability": 30, "color": "#D32F2F"},
    ],
    # Display strings only; no risk model stands behind VaR/CVaR/drawdown figures.
    "risk_wall": [
        {"name": "Base Regime", "value": "Tighten", "color": "#00FF88"},
        {"name": "P(Tighten 1Y)", "value": "55%", "color": "#FF3B30"},
        {"name": "P(Relief 1Y)", "value": "28%", "color": "#00A65A"},
        {"name": "VaR 95%", "value": "-19%", "color": "#FF3B30"},
        {"name": "CVaR 95%", "value": "-27%", "color": "#FF3B30"},
        {"name": "Max Drawdown", "value": "-34%", "color": "#FF3B30"},
        {"name": "Expected Time to Relief", "value": "4.6Y", "color": "#E5E7EB"},
    ],
}


def load_risk_datasets(raw: dict[str, Any]) -> RiskDatasets:
    """Validate raw dataset literals into immutable models."""

    try:
        return RiskDatasets.model_validate(raw)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid embedded risk dataset: {exc}") from exc


@lru_cache(maxsize=1)
def get_risk_datasets() -> RiskDatasets:
    """Cached accessor for the embedded datasets."""

    datasets = load_risk_datasets(EMBEDDED_DATASETS)
    logger.info(
        "Validated embedded risk datasets: %d scenarios, %d horizons, %d risk wall metrics",
        len(datasets.scenarios),
        len(datasets.timeline),
        len(datasets.risk_wall),
    )
    return datasets
