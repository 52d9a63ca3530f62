"""
Enumerations for transaction types and trend directions

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class TransactionType(str, Enum):
    income = "income"
    expense = "expense"


class TrendDirection(str, Enum):
    rising = "rising"
    declining = "declining"
    flat = "flat"

    @classmethod
    def from_slope(cls, slope: float, tolerance: float | None = None) -> TrendDirection:
        # tolerance lives in settings so reports can be tuned without touching this logic
        if tolerance is None:
            from config import settings

            tolerance = settings.forecast_flat_slope_tolerance

        if slope > tolerance:
            return cls.rising
        if slope < -tolerance:
            return cls.declining
        return cls.flat
