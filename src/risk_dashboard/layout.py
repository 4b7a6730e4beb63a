# This file plans how dashboard panels flow into the responsive card grid.
# Narrow viewports get one column of cards, wide viewports get two, and full-width panels always take a row of their own.
# The same viewport tiers drive the generated CSS, so the grid plan and the rendered page agree on breakpoints.

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar


class GridItem(Protocol):
    @property
    def full_width(self) -> bool: ...


ItemT = TypeVar("ItemT", bound=GridItem)


@dataclass(frozen=True)
class ViewportTier:
    name: str
    min_width_px: int
    panel_columns: int
    risk_wall_columns: int


VIEWPORT_TIERS: tuple[ViewportTier, ...] = (
    ViewportTier(name="narrow", min_width_px=0, panel_columns=1, risk_wall_columns=2),
    ViewportTier(name="small", min_width_px=640, panel_columns=1, risk_wall_columns=3),
    ViewportTier(name="wide", min_width_px=1024, panel_columns=2, risk_wall_columns=7),
)
WIDE_TIER = VIEWPORT_TIERS[-1]


@dataclass(frozen=True)
class GridRow(Generic[ItemT]):
    panels: tuple[ItemT, ...]
    full_width: bool = False


def tier_for_width(width_px: int, tiers: Sequence[ViewportTier] = VIEWPORT_TIERS) -> ViewportTier:
    if width_px < 0:
        raise ValueError("viewport width must be non-negative")
    selected = tiers[0]
    for tier in tiers:
        if width_px >= tier.min_width_px:
            selected = tier
    return selected


def plan_grid(panels: Iterable[ItemT], *, columns: int) -> list[GridRow[ItemT]]:
    """Place panels into rows the way CSS grid auto-placement would."""

    if columns < 1:
        raise ValueError("columns must be at least 1")

    rows: list[GridRow[ItemT]] = []
    pending: list[ItemT] = []
    for panel in panels:
        if panel.full_width:
            if pending:
                rows.append(GridRow(panels=tuple(pending)))
                pending = []
            rows.append(GridRow(panels=(panel,), full_width=True))
            continue
        pending.append(panel)
        if len(pending) == columns:
            rows.append(GridRow(panels=tuple(pending)))
            pending = []
    if pending:
        rows.append(GridRow(panels=tuple(pending)))
    return rows


def _stack_below_px(tiers: Sequence[ViewportTier]) -> int | None:
    multi_column = [tier.min_width_px for tier in tiers if tier.panel_columns > 1]
    return min(multi_column) if multi_column else None


def grid_css(tiers: Sequence[ViewportTier] = VIEWPORT_TIERS) -> str:
    """CSS that collapses Streamlit column rows and sizes the Risk Wall sub-grid per tier."""

    rules = [
        ".risk-wall-grid { display: grid; gap: 0.75rem; "
        f"grid-template-columns: repeat({tiers[0].risk_wall_columns}, minmax(0, 1fr)); }}"
    ]
    for tier in tiers[1:]:
        rules.append(
            f"@media (min-width: {tier.min_width_px}px) {{ .risk-wall-grid {{ "
            f"grid-template-columns: repeat({tier.risk_wall_columns}, minmax(0, 1fr)); }} }}"
        )

    stack_below = _stack_below_px(tiers)
    if stack_below is not None:
        rules.append(
            f"@media (max-width: {stack_below - 1}px) {{ "
            '[data-testid="stHorizontalBlock"] { flex-direction: column; } '
            '[data-testid="stHorizontalBlock"] > div { width: 100% !important; '
            "flex: 1 1 100% !important; min-width: 100% !important; } }"
        )
    return "\n".join(rules)
