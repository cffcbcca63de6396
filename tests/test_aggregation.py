from datetime import date

import pytest

from finance_insights import (
    Transaction,
    category_breakdown,
    cumulative_expenses,
    group_by_category,
    group_by_month,
)
from finance_insights.aggregation import month_key, sorted_months


def _tx(day: date, amount: float, category: str = "Outros", description: str = "x") -> Transaction:
    return Transaction.from_amount(date=day, description=description, category=category, amount=amount)


def test_month_key_is_zero_padded():
    assert month_key(date(2025, 3, 9)) == "2025-03"


def test_group_by_month_conservation(sample_report):
    txs = sample_report.transactions
    monthly = group_by_month(txs)
    assert list(monthly) == ["2025-01", "2025-02", "2025-03"]
    assert sum(b.income for b in monthly.values()) == pytest.approx(
        sum(tx.amount for tx in txs if tx.kind == "income")
    )
    assert sum(b.expense for b in monthly.values()) == pytest.approx(
        sum(tx.amount for tx in txs if tx.kind == "expense")
    )
    for bucket in monthly.values():
        assert bucket.total == pytest.approx(bucket.income + bucket.expense)
        assert bucket.expense <= 0


def test_sample_monthly_values(sample_report):
    jan = sample_report.monthly["2025-01"]
    assert jan.income == pytest.approx(6700.0)
    assert jan.expense == pytest.approx(-2986.50)
    mar = sample_report.monthly["2025-03"]
    assert mar.income == pytest.approx(5500.0)
    assert mar.total == pytest.approx(5500.0 - 4244.90)


def test_group_by_month_is_order_insensitive():
    txs = [_tx(date(2025, 1, 5), 100.0), _tx(date(2025, 2, 1), -40.0), _tx(date(2025, 1, 9), -10.0)]
    forward = group_by_month(txs)
    backward = group_by_month(list(reversed(txs)))
    assert {k: (v.income, v.expense, v.total) for k, v in forward.items()} == {
        k: (v.income, v.expense, v.total) for k, v in backward.items()
    }


def test_group_by_category_only_counts_expenses():
    txs = [
        _tx(date(2025, 1, 1), 500.0, "Lazer"),
        _tx(date(2025, 1, 2), -20.0, "Lazer"),
        _tx(date(2025, 1, 3), -30.0, "Contas"),
        _tx(date(2025, 1, 4), -5.5, "Lazer"),
    ]
    assert group_by_category(txs) == {"Lazer": pytest.approx(25.5), "Contas": pytest.approx(30.0)}
    assert list(group_by_category(txs)) == ["Lazer", "Contas"]


def test_income_category_never_appears():
    txs = [_tx(date(2025, 1, 1), 5500.0, "Renda")]
    assert group_by_category(txs) == {}


def test_category_totals_match_expense_magnitude(sample_report):
    expected = sum(abs(tx.amount) for tx in sample_report.transactions if tx.kind == "expense")
    assert sum(sample_report.categories.values()) == pytest.approx(expected)
    assert "Renda" not in sample_report.categories


def test_category_breakdown_sorted_with_shares():
    shares = category_breakdown({"A": 25.0, "B": 75.0})
    assert [(s.name, s.amount, s.share) for s in shares] == [("B", 75.0, 0.75), ("A", 25.0, 0.25)]
    assert category_breakdown({}) == []


def test_cumulative_expenses_sorted_and_grouped_by_day():
    txs = [
        _tx(date(2025, 1, 10), -30.0),
        _tx(date(2025, 1, 2), -10.0),
        _tx(date(2025, 1, 10), -5.0),
        _tx(date(2025, 1, 5), 100.0),
    ]
    points = cumulative_expenses(txs)
    assert [(p.date, p.total) for p in points] == [
        (date(2025, 1, 2), 10.0),
        (date(2025, 1, 10), 45.0),
    ]


def test_sorted_months():
    monthly = group_by_month([_tx(date(2025, 3, 1), 1.0), _tx(date(2024, 12, 1), 1.0)])
    assert [k for k, _ in sorted_months(monthly)] == ["2024-12", "2025-03"]
