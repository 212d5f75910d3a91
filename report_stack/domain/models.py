"""
Domain models for report_stack.

Defines the immutable record that every report stage reads, filters and
re-sequences. Only the base reports create records; decorators pass references
through untouched.
"""
from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

DATE_FORMAT = "%Y-%m-%d"

AmountLike = Union[Decimal, float, int, str]


def as_calendar_date(value: Union[dt.date, dt.datetime]) -> dt.date:
    """Truncate a datetime to its calendar date; dates pass through."""
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def as_decimal(value: AmountLike) -> Decimal:
    """Convert an amount to Decimal without inheriting binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def format_amount(amount: Decimal) -> str:
    return str(amount)


class Record(BaseModel):
    """
    One reportable transaction.
    """

    date: dt.date = Field(..., description="Calendar date of the transaction.")
    amount: Decimal = Field(..., ge=0, description="Non-negative monetary amount.")
    user_id: str = Field(..., min_length=1, description="Identifier of the user.")
    extra: str = Field("", description="Free-form tag, e.g. 'role:vip' or 'Product#3'.")

    model_config = {"frozen": True}

    @field_validator("date", mode="before")
    @classmethod
    def _truncate_time_of_day(cls, value: Any) -> Any:
        if isinstance(value, dt.datetime):
            return value.date()
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_from_float(cls, value: Any) -> Any:
        if isinstance(value, float):
            return as_decimal(value)
        return value

    def line(self) -> str:
        """Default one-line rendering used by plain and PDF-style reports."""
        return (
            f"{self.date.strftime(DATE_FORMAT)} | User:{self.user_id} | "
            f"Amount:{format_amount(self.amount)} | {self.extra}"
        )

    def __str__(self) -> str:
        return self.line()


__all__ = [
    "DATE_FORMAT",
    "AmountLike",
    "Record",
    "as_calendar_date",
    "as_decimal",
    "format_amount",
]
