"""Public interface for the ``finance_insights`` package.

This module re-exports the pipeline functions and public models as the
stable import surface. There is no runtime logic here.
"""

from .aggregation import (
    category_breakdown,
    cumulative_expenses,
    group_by_category,
    group_by_month,
)
from .api import analyze_csv, analyze_transactions, load_transactions, merge_transactions
from .categorization import CATEGORIES, detect_category
from .formatting import DEFAULT_FORMATTER, Formatter, format_currency, format_date
from .manual_entry import ManualEntry, build_manual_transaction
from .models import (
    CategoryData,
    FinanceReport,
    FinanceSummary,
    InvestmentPoint,
    MonthlyData,
    MonthlySummary,
    RawRow,
    Transaction,
)
from .normalizers import normalize_rows, parse_amount, parse_date
from .parsing import parse_csv, preview_csv
from .sample_data import SAMPLE_CSV
from .simulation import (
    INVESTMENT_RATES,
    SimulationParams,
    compare_investments,
    projection_totals,
    simulate_investment,
)
from .summary import compute_summary

__all__ = [
    # Pipeline
    "parse_csv",
    "preview_csv",
    "normalize_rows",
    "parse_amount",
    "parse_date",
    "detect_category",
    "group_by_month",
    "group_by_category",
    "category_breakdown",
    "cumulative_expenses",
    "compute_summary",
    "analyze_csv",
    "analyze_transactions",
    "load_transactions",
    "merge_transactions",
    # Simulator
    "simulate_investment",
    "compare_investments",
    "projection_totals",
    "SimulationParams",
    "INVESTMENT_RATES",
    # Manual entry
    "ManualEntry",
    "build_manual_transaction",
    # Formatting
    "format_currency",
    "format_date",
    "Formatter",
    "DEFAULT_FORMATTER",
    # Models / types
    "Transaction",
    "RawRow",
    "MonthlySummary",
    "MonthlyData",
    "CategoryData",
    "FinanceSummary",
    "FinanceReport",
    "InvestmentPoint",
    "CATEGORIES",
    "SAMPLE_CSV",
]
