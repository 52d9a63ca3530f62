"""
Forecast routes: a raw least-squares trend fit over caller-supplied amounts, and a next-expense projection built from a user's stored transactions.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging

from fastapi import APIRouter, Depends

from api.requests import ExpenseForecastRequest, TrendRequest
from api.responses import (
    INSUFFICIENT_DATA,
    NON_FINITE_RESULT,
    ExpenseForecastResponse,
    ForecastReportOut,
    TrendFitOut,
    TrendResponse,
)
from api.routes.common import get_store
from api.routes.exception import handle_exceptions
from engine.forecast import build_report, empty_summary_message, expense_series, fit, period_summary
from store.transactions import TransactionStore

router = APIRouter(tags=["Forecast"])
log = logging.getLogger(__name__)


@router.post("/forecast/trend", summary="Least-squares trend and next value for an ordered series")
@handle_exceptions
async def trend(req: TrendRequest) -> TrendResponse:
    result = fit(req.values)
    if result is None:
        return TrendResponse(forecast=None, points=len(req.values), reason=INSUFFICIENT_DATA)
    if not result.is_finite:
        log.warning("Trend fit over %d point(s) left the float range", len(req.values))
        return TrendResponse(forecast=None, points=len(req.values), reason=NON_FINITE_RESULT)
    return TrendResponse(forecast=TrendFitOut.of(result), points=len(req.values))


@router.post("/forecast/expenses", summary="Project the next expense from stored transactions")
@handle_exceptions
async def expense_forecast(
    req: ExpenseForecastRequest,
    store: TransactionStore = Depends(get_store),
) -> ExpenseForecastResponse:
    transactions = await store.list(req.user_id)
    values = expense_series(transactions, req.year, req.month)
    summary = period_summary(transactions, req.year, req.month)
    message = None if summary else empty_summary_message(transactions, req.label)

    report = build_report(values, label=req.label)
    if report is None:
        log.info("Expense forecast skipped: %d point(s) for period %s", len(values), req.label or "all")
        return ExpenseForecastResponse(
            forecast=None, summary=summary, points=len(values), reason=INSUFFICIENT_DATA, message=message,
        )
    if not report.fit.is_finite:
        log.warning("Expense forecast over %d point(s) left the float range", len(values))
        return ExpenseForecastResponse(
            forecast=None, summary=summary, points=len(values), reason=NON_FINITE_RESULT,
        )

    log.info(
        "Expense forecast points=%d slope=%.4f predicted_next=%.2f",
        len(values), report.fit.slope, report.fit.predicted_next,
    )
    return ExpenseForecastResponse(
        forecast=ForecastReportOut.of(report), summary=summary, points=len(values),
    )
