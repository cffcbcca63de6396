"""Folds over a normalized transaction sequence.

``group_by_month`` and ``group_by_category`` are independent single-pass
aggregations; neither depends on input order for its totals, and both keep
buckets in first-seen order. The remaining helpers shape those aggregates
for display (sorted tables, shares, a cumulative spending series).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from .models import CategoryData, MonthlyData, MonthlySummary, Transaction


def month_key(when: date) -> str:
    return f"{when.year:04d}-{when.month:02d}"


def group_by_month(transactions: Iterable[Transaction]) -> MonthlyData:
    """Sum income, expense and net per ``"YYYY-MM"`` month."""

    result: MonthlyData = {}
    for tx in transactions:
        bucket = result.setdefault(month_key(tx.date), MonthlySummary())
        if tx.kind == "income":
            bucket.income += tx.amount
        else:
            bucket.expense += tx.amount
        bucket.total += tx.amount
    return result


def group_by_category(transactions: Iterable[Transaction]) -> CategoryData:
    """Sum expense magnitudes per category. Income never contributes."""

    result: CategoryData = {}
    for tx in transactions:
        if tx.kind != "expense":
            continue
        result[tx.category] = result.get(tx.category, 0.0) + abs(tx.amount)
    return result


def sorted_months(monthly: MonthlyData) -> list[tuple[str, MonthlySummary]]:
    return sorted(monthly.items(), key=lambda item: item[0])


@dataclass(frozen=True, slots=True)
class CategoryShare:
    name: str
    amount: float
    share: float


def category_breakdown(categories: CategoryData) -> list[CategoryShare]:
    """Categories sorted by amount (largest first) with their share of the total."""

    total = sum(categories.values())
    ordered = sorted(categories.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryShare(name=name, amount=amount, share=(amount / total) if total else 0.0)
        for name, amount in ordered
    ]


@dataclass(frozen=True, slots=True)
class ExpensePoint:
    date: date
    total: float


def cumulative_expenses(transactions: Iterable[Transaction]) -> list[ExpensePoint]:
    """Running total of spending over time, one point per distinct date."""

    expenses = sorted((tx for tx in transactions if tx.kind == "expense"), key=lambda tx: tx.date)
    by_date: dict[date, float] = {}
    running = 0.0
    for tx in expenses:
        running += abs(tx.amount)
        by_date[tx.date] = running
    return [ExpensePoint(date=d, total=t) for d, t in by_date.items()]


__all__ = [
    "CategoryShare",
    "ExpensePoint",
    "category_breakdown",
    "cumulative_expenses",
    "group_by_category",
    "group_by_month",
    "month_key",
    "sorted_months",
]
