from __future__ import annotations

from collections.abc import Sequence

from .models import CategoryData, FinanceSummary, MonthlyData, Transaction

NO_CATEGORY = "N/A"


def compute_summary(
    transactions: Sequence[Transaction],
    monthly: MonthlyData,
    categories: CategoryData,
) -> FinanceSummary:
    """
    Derive dataset-wide totals and highlights.

    Args:
        transactions: Normalized transactions; totals are re-summed from here
            rather than from the aggregates.
        monthly: Output of ``group_by_month``; only its key count is used.
        categories: Output of ``group_by_category``, iterated in insertion order.
    Returns:
        FinanceSummary with ``monthly_average`` divided by at least one month
        and ``top_category`` set to ``"N/A"`` when no category beats zero.
    Assumptions:
        Pure function; ties for the top category keep the first one seen.
    """
    total_income = 0.0
    total_expense = 0.0
    for tx in transactions:
        if tx.kind == "income":
            total_income += tx.amount
        else:
            total_expense += tx.amount

    month_count = max(len(monthly), 1)

    top_category = NO_CATEGORY
    top_category_amount = 0.0
    for name, amount in categories.items():
        if amount > top_category_amount:
            top_category = name
            top_category_amount = amount

    return FinanceSummary(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income + total_expense,
        monthly_average=abs(total_expense) / month_count,
        top_category=top_category,
        top_category_amount=top_category_amount,
        transaction_count=len(transactions),
    )


__all__ = ["NO_CATEGORY", "compute_summary"]
