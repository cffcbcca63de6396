"""Data models and type aliases for ``finance_insights``.

Raw rows stay untyped (their keys are whatever headers the bank export
carries); everything after normalization is a concrete, immutable record.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal, TypeAlias

# ---------------------------------------------------------------------------
# Parser output
# ---------------------------------------------------------------------------

# One data line of the CSV, keyed by header. Headers are data-dependent, so
# this stays a plain mapping until the Normalizer turns it into a Transaction.
RawRow: TypeAlias = dict[str, str]

TransactionKind: TypeAlias = Literal["income", "expense"]


# ---------------------------------------------------------------------------
# Normalized transaction
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single normalized financial movement.

    ``kind`` is redundant with the sign of ``amount`` and is always derived
    from it: non-negative amounts are income, negative amounts are expenses.
    Use :meth:`from_amount` to build instances without spelling out ``kind``.
    """

    date: date
    description: str
    category: str
    amount: float
    kind: TransactionKind

    def __post_init__(self) -> None:
        expected = kind_for(self.amount)
        if self.kind != expected:
            raise ValueError(
                f"Transaction kind {self.kind!r} does not match amount {self.amount!r}"
            )

    @classmethod
    def from_amount(
        cls, *, date: date, description: str, category: str, amount: float
    ) -> Transaction:
        return cls(
            date=date,
            description=description,
            category=category,
            amount=amount,
            kind=kind_for(amount),
        )


def kind_for(amount: float) -> TransactionKind:
    return "income" if amount >= 0 else "expense"


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class MonthlySummary:
    """Per-month bucket. ``expense`` keeps its sign, so it is always <= 0."""

    income: float = 0.0
    expense: float = 0.0
    total: float = 0.0


# "YYYY-MM" -> bucket, in first-seen order.
MonthlyData: TypeAlias = dict[str, MonthlySummary]

# category label -> total expense magnitude, in first-seen order.
CategoryData: TypeAlias = dict[str, float]


@dataclass(frozen=True, slots=True)
class FinanceSummary:
    """Whole-dataset statistics, recomputed from scratch on every change.

    Attributes
    ----------
    total_income:
        Sum of income amounts.
    total_expense:
        Sum of expense amounts (negative or zero).
    balance:
        ``total_income + total_expense``.
    monthly_average:
        Expense magnitude divided by the number of distinct months (min 1).
    top_category:
        Category with the largest expense total, ``"N/A"`` when there is none.
    top_category_amount:
        Expense total of ``top_category`` (0 when there is none).
    transaction_count:
        Number of transactions analyzed.
    """

    total_income: float
    total_expense: float
    balance: float
    monthly_average: float
    top_category: str
    top_category_amount: float
    transaction_count: int


@dataclass(frozen=True, slots=True)
class FinanceReport:
    """Everything the presentation layer consumes after an upload."""

    transactions: tuple[Transaction, ...]
    monthly: MonthlyData
    categories: CategoryData
    summary: FinanceSummary


# ---------------------------------------------------------------------------
# Investment projection
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class InvestmentPoint:
    """One monthly sample of a compound-growth projection."""

    month: int
    label: str
    invested: float
    value: float


__all__ = [
    "CategoryData",
    "FinanceReport",
    "FinanceSummary",
    "InvestmentPoint",
    "MonthlyData",
    "MonthlySummary",
    "RawRow",
    "Transaction",
    "TransactionKind",
    "kind_for",
]
