"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, model_serializer

from engine.enums import TransactionType, TrendDirection
from engine.forecast import ForecastReport, Transaction, TrendFit

INSUFFICIENT_DATA = "insufficient_data"
NON_FINITE_RESULT = "non_finite_result"


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class TransactionOut(NpModel):

    id: str
    description: str
    amount: float
    type: TransactionType
    date: str
    category: str
    user_id: str

    @classmethod
    def of(cls, txn: Transaction) -> TransactionOut:
        return cls(**txn.__dict__)


class TrendFitOut(NpModel):

    slope: float
    intercept: float
    predicted_next: float

    @classmethod
    def of(cls, trend: TrendFit) -> TrendFitOut:
        return cls(slope=trend.slope, intercept=trend.intercept, predicted_next=trend.predicted_next)


class ChartPointOut(NpModel):

    period: str
    actual: Optional[float] = None
    predicted: float


class ForecastReportOut(NpModel):

    fit: TrendFitOut
    direction: TrendDirection
    points: List[ChartPointOut]
    projected_expense: str
    trend_note: str
    recommendation: str

    @classmethod
    def of(cls, report: ForecastReport) -> ForecastReportOut:
        return cls(
            fit=TrendFitOut.of(report.fit),
            direction=report.direction,
            points=[ChartPointOut(**p.__dict__) for p in report.points],
            projected_expense=report.projected_expense,
            trend_note=report.trend_note,
            recommendation=report.recommendation,
        )


class TransactionResponse(NpModel):
    transaction: TransactionOut


class TransactionListResponse(NpModel):
    transactions: List[TransactionOut]


class TransactionClearResponse(NpModel):
    deleted: int


class TrendResponse(NpModel):
    forecast: Optional[TrendFitOut] = None
    points: int
    reason: Optional[str] = None


class ExpenseForecastResponse(NpModel):
    forecast: Optional[ForecastReportOut] = None
    summary: List[str]
    points: int
    reason: Optional[str] = None
    message: Optional[str] = None
