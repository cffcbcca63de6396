"""Display formatting for the pt-BR / BRL locale.

The pipeline itself never formats; presentation code receives a
:class:`Formatter` so the locale choice stays out of the pure core.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

CURRENCY_SYMBOL = "R$"
# Intl's pt-BR currency output separates symbol and digits with a NBSP.
_NBSP = "\u00a0"

_MONTH_ABBR = ("jan.", "fev.", "mar.", "abr.", "mai.", "jun.", "jul.", "ago.", "set.", "out.", "nov.", "dez.")
_MONTH_SHORT = ("Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez")


def format_number(value: float, decimals: int = 2) -> str:
    """``1234.5`` → ``"1.234,50"``. Sign is kept for negatives."""

    s = f"{abs(value):,.{decimals}f}"
    s = s.replace(",", "\0").replace(".", ",").replace("\0", ".")
    return f"-{s}" if value < 0 and s.strip("0.,") else s


def format_currency(value: float) -> str:
    """``-1234.56`` → ``"-R$ 1.234,56"`` (with a non-breaking space)."""

    digits = format_number(value)
    if digits.startswith("-"):
        return f"-{CURRENCY_SYMBOL}{_NBSP}{digits[1:]}"
    return f"{CURRENCY_SYMBOL}{_NBSP}{digits}"


def format_date(when: date) -> str:
    return when.strftime("%d/%m/%Y")


def format_day_month(when: date) -> str:
    """Short chart label, e.g. ``"05 de mar."``."""

    return f"{when.day:02d} de {_MONTH_ABBR[when.month - 1]}"


def format_month_key(key: str) -> str:
    """``"2025-03"`` → ``"Mar/25"``. Unknown month numbers are kept as-is."""

    year, _, month = key.partition("-")
    label = _MONTH_SHORT[int(month) - 1] if month.isdigit() and 1 <= int(month) <= 12 else month
    return f"{label}/{year[-2:]}"


def format_percent(value: float, decimals: int = 1) -> str:
    return f"{format_number(value, decimals)}%"


@dataclass(frozen=True, slots=True)
class Formatter:
    currency: Callable[[float], str] = format_currency
    date: Callable[[date], str] = format_date
    day_month: Callable[[date], str] = format_day_month
    month: Callable[[str], str] = format_month_key


DEFAULT_FORMATTER = Formatter()


__all__ = [
    "DEFAULT_FORMATTER",
    "Formatter",
    "format_currency",
    "format_date",
    "format_day_month",
    "format_month_key",
    "format_number",
    "format_percent",
]
