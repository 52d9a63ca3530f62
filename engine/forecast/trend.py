"""
Linear trend estimation over an ordered series of amounts, fitting an ordinary least-squares line against 1-based positions and extrapolating it one step past the last observation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from config import FORECAST_MIN_POINTS


@dataclass(frozen=True)
class TrendFit:
    slope: float
    intercept: float
    predicted_next: float

    def value_at(self, index: float) -> float:
        """Evaluate the fitted line at a 1-based position."""
        return self.slope * index + self.intercept

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.slope, self.intercept, self.predicted_next))


def _positions(n: int) -> np.ndarray:
    return np.arange(1, n + 1, dtype=float)


def _scale(y: np.ndarray) -> float:
    # power of two near the largest magnitude, so dividing only shifts exponents
    with np.errstate(invalid="ignore"):
        peak = float(np.max(np.abs(y)))
    if not math.isfinite(peak) or peak == 0.0:
        return 1.0
    return math.ldexp(0.5, math.frexp(peak)[1])


def fit(values: Sequence[float]) -> Optional[TrendFit]:
    """Fit ``value = slope * index + intercept`` with index running 1..n.

    Returns ``None`` when fewer than two observations are supplied; that is
    the "not enough data" signal, not an error. The input is never modified.

    The sums run on the series divided by a power of two near its peak, so
    finite values near the float limit do not overflow in the mean. A result
    whose true slope or projection lies beyond the float range still comes
    back non-finite.

    Non-finite values are not rejected here: NaN and infinity flow through the
    arithmetic and show up in the result, which callers can detect with
    :attr:`TrendFit.is_finite`.
    """
    y = np.array(values, dtype=float)
    n = y.size
    if n < FORECAST_MIN_POINTS:
        return None

    scale = _scale(y)
    x = _positions(n)
    mean_x = x.mean()
    dx = x - mean_x
    with np.errstate(invalid="ignore", over="ignore"):
        ys = y / scale
        mean_y = ys.mean()
        numerator = float(np.sum(dx * (ys - mean_y)))
    # strictly positive for n >= 2 since positions never repeat
    denominator = float(np.sum(dx ** 2))

    slope = numerator / denominator
    intercept = float(mean_y) - slope * float(mean_x)
    next_value = slope * (n + 1) + intercept

    with np.errstate(over="ignore", invalid="ignore"):
        return TrendFit(
            slope=float(np.float64(slope) * scale),
            intercept=float(np.float64(intercept) * scale),
            predicted_next=float(np.float64(next_value) * scale),
        )
