"""
Forecasting logic for spending trends: least-squares trend fitting over ordered amounts, expense series extraction from stored transactions, and report building for display.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.trend import TrendFit, fit
from engine.forecast.series import Transaction, empty_summary_message, expense_series, period_summary
from engine.forecast.report import ChartPoint, ForecastReport, build_report

__all__ = [
    "TrendFit", "fit",
    "Transaction", "empty_summary_message", "expense_series", "period_summary",
    "ChartPoint", "ForecastReport", "build_report",
]
