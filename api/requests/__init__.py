from __future__ import annotations

import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, FiniteFloat

from engine.enums import TransactionType


class TransactionCreate(BaseModel):
    description: str = Field(min_length=1)
    amount: float = Field(gt=0, allow_inf_nan=False, strict=True)
    type: TransactionType
    date: datetime.date
    category: str = Field(min_length=1)
    user_id: str = Field(min_length=1)


class TrendRequest(BaseModel):
    values: List[FiniteFloat] = Field(default_factory=list)


class ExpenseForecastRequest(BaseModel):
    user_id: str = Field(min_length=1)
    year: Optional[int] = Field(default=None, ge=1900, le=9999)
    month: Optional[int] = Field(default=None, ge=1, le=12)

    @property
    def label(self) -> Optional[str]:
        if self.year is not None and self.month is not None:
            return f"{self.month}/{self.year}"
        if self.year is not None:
            return str(self.year)
        if self.month is not None:
            return f"month {self.month}"
        return None
