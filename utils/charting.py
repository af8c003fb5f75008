from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from domain.records import Record

DEFAULT_PALETTE: tuple[str, ...] = ("#00FF00", "#0000FF", "#FF6347", "#FFD700", "#8A2BE2")
INCOME_BAR_COLOR = "#10b981"
EXPENSE_BAR_COLOR = "#ef4444"


@dataclass(frozen=True)
class ChartSegment:
    label: str
    value: float
    color: str


def group_totals(records: Iterable[Record]) -> dict[str, float]:
    """Sum amounts per category; categories match by exact string."""
    totals: dict[str, float] = {}
    for record in records:
        totals[record.category] = totals.get(record.category, 0) + record.amount
    return totals


def sum_total(records: Iterable[Record]) -> float:
    return sum((record.amount for record in records), 0)


def to_chart_series(
    totals: Mapping[str, float], palette: Sequence[str] = DEFAULT_PALETTE
) -> list[ChartSegment]:
    """Map totals to chart segments, cycling through ``palette`` by position."""
    if not totals:
        return []
    if not palette:
        raise ValueError("Palette must contain at least one color")
    return [
        ChartSegment(label=label, value=value, color=palette[index % len(palette)])
        for index, (label, value) in enumerate(totals.items())
    ]


def net_balance(income_total: float, expense_total: float) -> float:
    return income_total - expense_total


def income_expense_bars(income_total: float, expense_total: float) -> list[ChartSegment]:
    return [
        ChartSegment(label="Income", value=income_total, color=INCOME_BAR_COLOR),
        ChartSegment(label="Expenses", value=expense_total, color=EXPENSE_BAR_COLOR),
    ]


def bar_value_range(bars: Iterable[ChartSegment]) -> tuple[float, float]:
    """Lowest and highest bar heights, always spanning zero.

    Non-finite values are drawn as empty bars.
    """
    values = [bar.value if math.isfinite(bar.value) else 0.0 for bar in bars]
    return min([0.0, *values]), max([0.0, *values])
