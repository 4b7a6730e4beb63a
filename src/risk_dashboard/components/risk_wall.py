# This file renders the Risk Wall, the full-width strip of headline risk metrics.
# Each metric becomes one equal-sized cell: the name in neutral text and the value in its fixed display color.
# The strip is plain HTML so the sub-grid can reflow from 2 to 7 columns with the page CSS.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from html import escape

from src.risk_dashboard.risk_data import RiskMetric
from src.risk_dashboard.theme import NEUTRAL_COLOR


@dataclass(frozen=True)
class RiskWallCell:
    name: str
    value: str
    value_color: str
    name_color: str = NEUTRAL_COLOR

    def to_html(self) -> str:
        return (
            '<div class="risk-wall-cell">'
            f'<span class="risk-wall-name" style="color:{self.name_color}">{escape(self.name)}</span>'
            f'<span class="risk-wall-value" style="color:{self.value_color}">{escape(self.value)}</span>'
            "</div>"
        )


@dataclass(frozen=True)
class RiskWall:
    cells: tuple[RiskWallCell, ...]

    @property
    def html(self) -> str:
        body = "".join(cell.to_html() for cell in self.cells)
        return f'<div class="risk-wall-grid">{body}</div>'

    def cell(self, name: str) -> RiskWallCell:
        for cell in self.cells:
            if cell.name == name:
                return cell
        raise KeyError(name)


def build_risk_wall(metrics: Iterable[RiskMetric]) -> RiskWall:
    return RiskWall(
        cells=tuple(
            RiskWallCell(name=metric.name, value=metric.value, value_color=metric.color)
            for metric in metrics
        )
    )
