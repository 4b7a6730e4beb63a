# This file collects small formatting helpers used across dashboard panels.
# Pie labels and axis ticks present shares the same way on every chart.

from __future__ import annotations

import math
from collections.abc import Sequence

# Vega expression appending a percent sign to axis tick labels.
PERCENT_LABEL_EXPR = "datum.label + '%'"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def share_percentages(values: Sequence[float]) -> list[int]:
    """Each value's share of the total, as whole percentages rounded half-up."""

    total = float(sum(values))
    if total <= 0:
        return [0 for _ in values]
    return [round_half_up(100.0 * float(value) / total) for value in values]


def format_share_label(name: str, share: int) -> str:
    return f"{name} {share}%"


def share_labels(names: Sequence[str], values: Sequence[float]) -> list[str]:
    return [
        format_share_label(name, share)
        for name, share in zip(names, share_percentages(values), strict=True)
    ]
