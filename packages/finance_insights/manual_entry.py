"""Manual Entry Adapter: free-text form input → :class:`Transaction`.

Manual entries bypass the CSV path entirely. The user types a date, a
description and a positive amount, picks whether it is money in or out and
chooses a category; the adapter signs the amount from that choice and
produces the same record type the Normalizer emits.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .categorization import CATEGORIES, FALLBACK_CATEGORY
from .logging_setup import get_logger
from .models import Transaction
from .normalizers import parse_amount, parse_date

_logger = get_logger("finance_insights.manual_entry")


class ManualEntry(BaseModel):
    """Validated manual-entry form.

    ``date`` accepts the same textual formats as CSV dates; ``amount`` accepts
    decimal-comma text and must be strictly positive; ``category`` must be
    one of :data:`~finance_insights.categorization.CATEGORIES` (matched
    case-insensitively).
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    date: dt.date
    description: str
    amount: float
    kind: Literal["income", "expense"] = "expense"
    category: str = FALLBACK_CATEGORY

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, v: Any) -> Any:
        if isinstance(v, str):
            parsed = parse_date(v)
            if parsed is None:
                raise ValueError(f"invalid date: {v!r}")
            return parsed
        return v

    @field_validator("description")
    @classmethod
    def _description_non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("description must be non-empty")
        return v

    @field_validator("amount", mode="before")
    @classmethod
    def _parse_amount(cls, v: Any) -> Any:
        if isinstance(v, str):
            parsed = parse_amount(v)
            if parsed is None:
                raise ValueError(f"invalid amount: {v!r}")
            return parsed
        return v

    @field_validator("amount")
    @classmethod
    def _amount_positive(cls, v: float) -> float:
        if not (math.isfinite(v) and v > 0):
            raise ValueError("amount must be a finite number greater than zero")
        return v

    @field_validator("category")
    @classmethod
    def _known_category(cls, v: str) -> str:
        by_lower = {c.lower(): c for c in CATEGORIES}
        canonical = by_lower.get(v.lower())
        if canonical is None:
            raise ValueError(f"unknown category: {v!r}")
        return canonical

    def to_transaction(self) -> Transaction:
        signed = -abs(self.amount) if self.kind == "expense" else abs(self.amount)
        return Transaction(
            date=self.date,
            description=self.description,
            category=self.category,
            amount=signed,
            kind=self.kind,
        )


def build_manual_transaction(**fields: Any) -> Transaction | None:
    """Build a transaction from form fields, or ``None`` when they are invalid."""

    try:
        return ManualEntry(**fields).to_transaction()
    except ValidationError as exc:
        _logger.debug("ignoring invalid manual entry: %s", exc)
        return None


__all__ = ["ManualEntry", "build_manual_transaction"]
