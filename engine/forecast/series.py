"""
Transaction records and the helpers that turn a user's ledger into the chronologically ordered amount series consumed by the trend estimator.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from engine.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    id: str
    description: str
    amount: float
    type: TransactionType
    date: str
    category: str
    user_id: str

    @property
    def day(self) -> datetime.date:
        return datetime.date.fromisoformat(self.date[:10])


def in_period(txn: Transaction, year: Optional[int] = None, month: Optional[int] = None) -> bool:
    day = txn.day
    if year is not None and day.year != year:
        return False
    if month is not None and day.month != month:
        return False
    return True


def select(
    transactions: Iterable[Transaction],
    year: Optional[int] = None,
    month: Optional[int] = None,
    kind: Optional[TransactionType] = None,
) -> List[Transaction]:
    selected = [
        t for t in transactions
        if (kind is None or t.type == kind) and in_period(t, year, month)
    ]
    # stable: same-day entries keep insertion order
    return sorted(selected, key=lambda t: t.day)


def expense_series(
    transactions: Iterable[Transaction],
    year: Optional[int] = None,
    month: Optional[int] = None,
    kind: TransactionType = TransactionType.expense,
) -> List[float]:
    return [t.amount for t in select(transactions, year, month, kind)]


def period_summary(
    transactions: Iterable[Transaction],
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> List[str]:
    return [
        f"{t.date}, {t.type.value}, {t.category}, ${t.amount:.2f}, {t.description}"
        for t in select(transactions, year, month)
    ]


def empty_summary_message(transactions: Sequence[Transaction], label: Optional[str] = None) -> str:
    """Text shown in place of summary lines when a period has no entries."""
    if not transactions:
        return "No transaction data available. Please add transactions first."
    if label:
        return f"No transactions found for {label}."
    return "No transactions found."
