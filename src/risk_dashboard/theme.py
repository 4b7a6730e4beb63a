# This file defines the dark visual theme shared by every dashboard panel.
# It exists so palettes, semantic colors, card styling, and the tooltip look are declared once.
# Charts pick up the theme through `apply_chart_theme`; page-level styling is emitted as one CSS block.
# The fade-in is a CSS animation bound to the panel container, not a timed callback.

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, TypeVar

import altair as alt

from src.risk_dashboard.layout import VIEWPORT_TIERS, ViewportTier, grid_css

if TYPE_CHECKING:
    from src.risk_dashboard.dashboard import Panel

CardStyle = Literal["filled", "outlined"]
ChartT = TypeVar("ChartT", alt.Chart, alt.LayerChart)

PAGE_BACKGROUND = "#000000"
CARD_BACKGROUND = "#111827"
OUTLINED_CARD_BACKGROUND = "#0B0F14"
METRIC_CELL_BACKGROUND = "#1A1F27"
BORDER_COLOR = "#2A2F36"
TEXT_COLOR = "#F3F4F6"
TITLE_COLOR = "#FFFFFF"
MUTED_TEXT_COLOR = "#9CA3AF"

WARNING_COLOR = "#FF3B30"
POSITIVE_COLOR = "#00A65A"
NEUTRAL_COLOR = "#E5E7EB"
HIGHLIGHT_COLOR = "#00FF88"

SCENARIO_PALETTE: tuple[str, ...] = ("#00A65A", "#D32F2F", "#6B7280")
GEO_PALETTE: tuple[str, ...] = ("#0072CE", "#00A65A", "#D32F2F", "#6B7280", "#F59E0B")

TIMELINE_COLORS: dict[str, str] = {"Relief": "#00A65A", "Tighten": "#D32F2F"}
SANCTION_IMPACT_COLORS: dict[str, str] = {"Equities": "#D32F2F", "RealEstate": "#00A65A"}
REGIME_SHIFT_COLORS: dict[str, str] = {"change": "#F59E0B"}

GRID_DASH: tuple[int, int] = (3, 3)
LINE_STROKE_WIDTH = 3


@dataclass(frozen=True)
class TooltipStyle:
    background_color: str = CARD_BACKGROUND
    border: str = f"1px solid {BORDER_COLOR}"
    color: str = TEXT_COLOR

    def to_css(self) -> str:
        return (
            "#vg-tooltip-element, #vg-tooltip-element.vg-tooltip { "
            f"background-color: {self.background_color} !important; "
            f"border: {self.border} !important; "
            f"color: {self.color} !important; }}\n"
            "#vg-tooltip-element td.key, #vg-tooltip-element td.value { "
            f"color: {self.color} !important; }}"
        )


TOOLTIP_STYLE = TooltipStyle()


def palette_by_position(palette: Sequence[str], count: int) -> list[str]:
    return [palette[index % len(palette)] for index in range(count)]


def card_container_key(panel_key: str, card_style: CardStyle) -> str:
    return f"panel-{card_style}-{panel_key}"


def apply_chart_theme(chart: ChartT) -> ChartT:
    return (
        chart.configure(background=CARD_BACKGROUND, font="Inter, sans-serif")
        .configure_view(strokeWidth=0)
        .configure_axis(
            domainColor=TEXT_COLOR,
            tickColor=TEXT_COLOR,
            labelColor=TEXT_COLOR,
            titleColor=TEXT_COLOR,
            gridColor=BORDER_COLOR,
            gridDash=list(GRID_DASH),
        )
        .configure_legend(labelColor=TEXT_COLOR, titleColor=TEXT_COLOR)
    )


def _card_css() -> str:
    return "\n".join(
        [
            f".stApp {{ background-color: {PAGE_BACKGROUND}; color: {TEXT_COLOR}; }}",
            '[class*="st-key-panel-filled-"] { '
            f"background-color: {CARD_BACKGROUND}; border-radius: 1rem; padding: 1.25rem; "
            "box-shadow: 0 20px 25px -5px rgba(0, 0, 0, 0.5), 0 8px 10px -6px rgba(0, 0, 0, 0.5); }",
            '[class*="st-key-panel-outlined-"] { '
            f"background-color: {OUTLINED_CARD_BACKGROUND}; border: 2px solid {BORDER_COLOR}; "
            "border-radius: 1rem; padding: 1.5rem; "
            "box-shadow: 0 20px 25px -5px rgba(0, 0, 0, 0.5), 0 8px 10px -6px rgba(0, 0, 0, 0.5); }",
            '[class*="st-key-panel-"] h3 { '
            f"color: {TITLE_COLOR}; font-weight: 700; }}",
            '[class*="st-key-panel-"] [data-testid="stCaptionContainer"] { '
            f"color: {MUTED_TEXT_COLOR}; }}",
            ".risk-wall-cell { "
            f"background-color: {METRIC_CELL_BACKGROUND}; border-radius: 0.75rem; padding: 0.75rem; "
            "display: flex; justify-content: space-between; gap: 0.5rem; font-size: 0.875rem; }",
            ".risk-wall-name { font-weight: 500; }",
            ".risk-wall-value { font-weight: 700; }",
        ]
    )


def _fade_in_css(panels: Iterable[Panel], *, seconds: float) -> str:
    selectors = [
        f".st-key-{card_container_key(panel.key, panel.card_style)}"
        for panel in panels
        if panel.fade_in
    ]
    if not selectors:
        return ""
    return (
        "@keyframes risk-panel-fade-in { from { opacity: 0; } to { opacity: 1; } }\n"
        f"{', '.join(selectors)} {{ animation: risk-panel-fade-in {seconds}s ease-out 1 both; }}"
    )


def build_page_css(
    panels: Sequence[Panel],
    *,
    fade_in_seconds: float | None,
    tiers: Sequence[ViewportTier] = VIEWPORT_TIERS,
) -> str:
    """Assemble the page stylesheet; `fade_in_seconds=None` disables the fade-in."""

    blocks = [_card_css(), TOOLTIP_STYLE.to_css(), grid_css(tiers)]
    if fade_in_seconds is not None:
        fade = _fade_in_css(panels, seconds=fade_in_seconds)
        if fade:
            blocks.append(fade)
    return "\n".join(blocks)
