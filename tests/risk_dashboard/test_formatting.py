# This test file covers the share-label helpers used by both pie charts.

from __future__ import annotations

import pytest

from src.risk_dashboard.formatting import (
    format_share_label,
    round_half_up,
    share_labels,
    share_percentages,
)


@pytest.mark.parametrize(("value", "expected"), [(12.5, 13), (87.5, 88), (0.49, 0), (54.5, 55)])
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


def test_share_percentages_use_sum_of_values() -> None:
    assert share_percentages([28, 55, 17]) == [28, 55, 17]
    assert share_percentages([25, 45, 10, 10, 10]) == [25, 45, 10, 10, 10]
    assert share_percentages([1, 1, 1]) == [33, 33, 33]


@pytest.mark.parametrize("values", [[1, 7], [1, 1, 1], [2, 3, 4, 5, 6], [10, 20, 123]])
def test_rounded_shares_stay_within_half_point_per_slice(values: list[int]) -> None:
    shares = share_percentages(values)

    assert abs(sum(shares) - 100) <= 0.5 * len(shares)


def test_share_percentages_of_all_zero_values() -> None:
    assert share_percentages([0, 0]) == [0, 0]


def test_share_labels() -> None:
    assert format_share_label("Relief", 28) == "Relief 28%"
    assert share_labels(["UAE", "Bali"], [10, 30]) == ["UAE 25%", "Bali 75%"]


def test_share_labels_require_matching_lengths() -> None:
    with pytest.raises(ValueError):
        share_labels(["UAE"], [10, 30])
