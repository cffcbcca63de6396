"""Raw CSV rows → typed :class:`~finance_insights.models.Transaction` records.

Header names vary between banks (Portuguese and English exports, with or
without a category column), so column resolution is heuristic and runs once
per upload against the first row's headers. Rows missing a mandatory field,
or carrying an amount/date that cannot be parsed, are dropped; the rest of
the batch proceeds.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime

from .categorization import detect_category
from .logging_setup import get_logger
from .models import RawRow, Transaction

_logger = get_logger("finance_insights.normalizers")

# ---------------------------------------------------------------------------
# Header resolution
# ---------------------------------------------------------------------------

DATE_HEADERS = ("data", "date")
AMOUNT_HEADERS = ("valor", "amount", "value")
CATEGORY_HEADERS = ("categoria", "category")
DESCRIPTION_MARKER = "descri"


@dataclass(frozen=True, slots=True)
class ColumnMap:
    """Resolved header names. ``None`` means the column is not available."""

    date: str | None
    description: str | None
    amount: str | None
    category: str | None


def _find(lowered: list[str], predicate) -> int | None:
    for idx, header in enumerate(lowered):
        if predicate(header):
            return idx
    return None


def _at(headers: Sequence[str], idx: int | None, fallback: int | None) -> str | None:
    pos = idx if idx is not None else fallback
    if pos is None or pos >= len(headers):
        return None
    return headers[pos]


def resolve_columns(headers: Sequence[str]) -> ColumnMap:
    """Map the date/description/amount/category roles onto ``headers``.

    Matching is case-insensitive. Without a match, date falls back to the
    first column, description to the second and amount to the third; the
    category column is optional and has no fallback.
    """

    lowered = [h.lower().strip() for h in headers]
    date_idx = _find(lowered, lambda h: h in DATE_HEADERS)
    desc_idx = _find(lowered, lambda h: DESCRIPTION_MARKER in h)
    amount_idx = _find(lowered, lambda h: h in AMOUNT_HEADERS)
    category_idx = _find(lowered, lambda h: h in CATEGORY_HEADERS)

    return ColumnMap(
        date=_at(headers, date_idx, 0),
        description=_at(headers, desc_idx, 1),
        amount=_at(headers, amount_idx, 2),
        category=_at(headers, category_idx, None),
    )


# ---------------------------------------------------------------------------
# Field parsing
# ---------------------------------------------------------------------------

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
# Hyphenated year-first dates, optionally followed by a time part. Compact
# ("20250325") and week ("2025-W13-2") ISO forms are not statement dates.
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}(?:[T ].*)?$")


def parse_amount(raw: str) -> float | None:
    """Parse a signed amount, honoring decimal-comma notation.

    With a comma present the value is read as ``1.234,56`` style: periods are
    thousands separators and the comma is the decimal mark. Otherwise the
    period is the decimal mark. Returns ``None`` when the text is not a
    finite plain decimal.
    """

    s = raw.strip()
    if "," in s:
        s = s.replace(".", "").replace(",", ".", 1)
    if not _DECIMAL_RE.fullmatch(s):
        return None
    value = float(s)
    if not math.isfinite(value):
        return None
    return value


def _ymd(year: str, month: str, day: str) -> date | None:
    if not (len(year) == 4 and year.isdigit() and month.isdigit() and day.isdigit()):
        return None
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def _from_parts(parts: Sequence[str]) -> date | None:
    if len(parts) != 3:
        return None
    year, month, day = (p.strip() for p in parts)
    return _ymd(year, month, day)


def parse_date(raw: str) -> date | None:
    """Parse ``DD/MM/YYYY``, ``YYYY/MM/DD`` or ISO ``YYYY-MM-DD`` text.

    Slash-separated values whose first segment has four characters are read
    year-first; any other slash-separated value is read day-first. Returns
    ``None`` for anything that is not a valid calendar date.
    """

    s = raw.strip()
    if "/" in s:
        parts = s.split("/")
        if len(parts[0]) == 4:
            return _from_parts(parts)
        return _from_parts(list(reversed(parts)))

    if not _ISO_DATE_RE.fullmatch(s):
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        pass
    # Unpadded ISO-like text such as "2025-3-5".
    return _from_parts(s.split("-"))


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def _normalize_row(row: RawRow, columns: ColumnMap) -> Transaction | None:
    raw_amount = (row.get(columns.amount) if columns.amount is not None else None) or ""
    raw_date = (row.get(columns.date) if columns.date is not None else None) or ""
    description = (
        row.get(columns.description) if columns.description is not None else None
    ) or ""

    if not raw_amount.strip() or not raw_date.strip() or not description.strip():
        _logger.debug("dropping row with missing mandatory field: %r", row)
        return None

    amount = parse_amount(raw_amount)
    if amount is None:
        _logger.debug("dropping row with unparseable amount %r", raw_amount)
        return None

    when = parse_date(raw_date)
    if when is None:
        _logger.debug("dropping row with unparseable date %r", raw_date)
        return None

    explicit = row.get(columns.category) if columns.category is not None else None
    category = explicit if explicit else detect_category(description)

    return Transaction.from_amount(
        date=when,
        description=description,
        category=category,
        amount=amount,
    )


def normalize_rows(rows: Sequence[RawRow]) -> list[Transaction]:
    """Convert parsed rows into transactions, preserving input order."""

    if not rows:
        return []

    columns = resolve_columns(list(rows[0].keys()))
    _logger.debug("resolved columns: %s", columns)

    transactions: list[Transaction] = []
    for row in rows:
        tx = _normalize_row(row, columns)
        if tx is not None:
            transactions.append(tx)

    dropped = len(rows) - len(transactions)
    if dropped:
        _logger.info("normalized %d of %d rows (%d dropped)", len(transactions), len(rows), dropped)
    return transactions


__all__ = [
    "AMOUNT_HEADERS",
    "CATEGORY_HEADERS",
    "ColumnMap",
    "DATE_HEADERS",
    "normalize_rows",
    "parse_amount",
    "parse_date",
    "resolve_columns",
]
