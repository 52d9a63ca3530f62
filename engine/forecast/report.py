"""
Forecast reporting: wraps a trend fit with chart points, a trend direction and short narrative lines describing the projected next expense.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from config import settings
from engine.enums import TrendDirection
from engine.forecast.trend import TrendFit, fit

NEXT_PERIOD = "Next"

_RECOMMENDATIONS = {
    TrendDirection.rising: "Consider reviewing discretionary spending or setting stricter monthly limits.",
    TrendDirection.declining: "Great job! Your expenses appear to be stabilizing or decreasing over time.",
    TrendDirection.flat: "Great job! Your expenses appear to be stabilizing or decreasing over time.",
}


@dataclass(frozen=True)
class ChartPoint:
    period: str
    actual: Optional[float]
    predicted: float


@dataclass(frozen=True)
class ForecastReport:
    fit: TrendFit
    direction: TrendDirection
    points: List[ChartPoint]
    projected_expense: str
    trend_note: str
    recommendation: str


def chart_points(values: Sequence[float], trend: TrendFit) -> List[ChartPoint]:
    points = [
        ChartPoint(period=f"#{i}", actual=float(v), predicted=trend.value_at(i))
        for i, v in enumerate(values, start=1)
    ]
    points.append(ChartPoint(period=NEXT_PERIOD, actual=None, predicted=trend.predicted_next))
    return points


def _money(value: float) -> str:
    return f"${value:.{settings.forecast_money_precision}f}"


def build_report(values: Sequence[float], label: Optional[str] = None) -> Optional[ForecastReport]:
    trend = fit(values)
    if trend is None:
        return None

    direction = TrendDirection.from_slope(trend.slope)
    prefix = f"For {label}, the" if label else "The"
    return ForecastReport(
        fit=trend,
        direction=direction,
        points=chart_points(values, trend),
        projected_expense=f"{prefix} next projected expense is approximately {_money(trend.predicted_next)}.",
        trend_note=(
            f"Your spending trend slope is {trend.slope:.2f}, "
            f"indicating a {direction.value} expense trend."
        ),
        recommendation=_RECOMMENDATIONS[direction],
    )
