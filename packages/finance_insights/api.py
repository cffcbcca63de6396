"""Public orchestration for the ``finance_insights`` pipeline.

Parser → Normalizer → {monthly, category} aggregation → summary. Every call
rebuilds all derived state from scratch; nothing is cached between uploads.
"""

from __future__ import annotations

from collections.abc import Iterable

from .aggregation import group_by_category, group_by_month
from .logging_setup import get_logger
from .models import FinanceReport, Transaction
from .normalizers import normalize_rows
from .parsing import parse_csv
from .summary import compute_summary

_logger = get_logger("finance_insights.api")


def load_transactions(text: str) -> list[Transaction]:
    """Parse and normalize CSV ``text``. Empty when there is no data line."""

    return normalize_rows(parse_csv(text))


def merge_transactions(
    csv_transactions: Iterable[Transaction], manual: Iterable[Transaction]
) -> list[Transaction]:
    """Union CSV-derived transactions with manual entries (CSV first)."""

    return [*csv_transactions, *manual]


def analyze_transactions(transactions: Iterable[Transaction]) -> FinanceReport:
    """Compute every aggregate for ``transactions``."""

    txs = tuple(transactions)
    monthly = group_by_month(txs)
    categories = group_by_category(txs)
    summary = compute_summary(txs, monthly, categories)
    return FinanceReport(
        transactions=txs, monthly=monthly, categories=categories, summary=summary
    )


def analyze_csv(text: str, manual: Iterable[Transaction] = ()) -> FinanceReport:
    """Run the full pipeline over CSV ``text`` plus any manual entries."""

    transactions = merge_transactions(load_transactions(text), manual)
    report = analyze_transactions(transactions)
    _logger.info(
        "analyzed %d transactions across %d months",
        report.summary.transaction_count,
        len(report.monthly),
    )
    return report


__all__ = [
    "analyze_csv",
    "analyze_transactions",
    "load_transactions",
    "merge_transactions",
]
