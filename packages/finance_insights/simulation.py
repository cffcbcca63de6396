"""Compound-interest projection for fixed-income investments.

The simulator is independent of any uploaded statement: it projects an
initial amount plus fixed monthly contributions under a nominal annual rate
(``annual_rate / 100 / 12`` per month, no effective-rate conversion).

``simulate_investment`` itself performs no input validation; callers that
accept user input clamp it first through :class:`SimulationParams`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, field_validator

from .models import InvestmentPoint

InvestmentType: TypeAlias = Literal["selic", "cdi", "ipca"]


@dataclass(frozen=True, slots=True)
class InvestmentRate:
    name: str
    rate: float
    description: str


INVESTMENT_RATES: Mapping[InvestmentType, InvestmentRate] = {
    "selic": InvestmentRate(
        name="SELIC",
        rate=10.75,
        description=(
            "Taxa básica de juros da economia brasileira, definida pelo Banco Central "
            "a cada 45 dias."
        ),
    ),
    "cdi": InvestmentRate(
        name="CDI",
        rate=10.65,
        description=(
            "Certificado de Depósito Interbancário. Referência para investimentos de "
            "renda fixa como CDBs."
        ),
    ),
    "ipca": InvestmentRate(
        name="IPCA+",
        rate=4.5,
        description=(
            "Índice de inflação oficial do Brasil. Investimentos IPCA+ protegem seu "
            "dinheiro da inflação mais um prêmio fixo."
        ),
    ),
}

START_LABEL = "Início"


def period_label(month: int) -> str:
    """Compact elapsed-time label: ``"Início"``, ``"5m"``, ``"1a"``, ``"2a 3m"``."""

    if month == 0:
        return START_LABEL
    years, months = divmod(month, 12)
    parts = []
    if years > 0:
        parts.append(f"{years}a")
    if months > 0:
        parts.append(f"{months}m")
    return " ".join(parts) or f"{years}a"


@lru_cache(maxsize=128)
def _simulate(
    initial: float, monthly_contribution: float, months: int, annual_rate: float
) -> tuple[InvestmentPoint, ...]:
    monthly_rate = annual_rate / 100 / 12
    value = initial
    invested = initial
    points: list[InvestmentPoint] = []

    for i in range(months + 1):
        points.append(
            InvestmentPoint(month=i, label=period_label(i), invested=invested, value=value)
        )
        value = value * (1 + monthly_rate)
        if i < months:
            value += monthly_contribution
            invested += monthly_contribution

    return tuple(points)


def simulate_investment(
    initial: float,
    monthly_contribution: float,
    months: int,
    annual_rate: float,
) -> list[InvestmentPoint]:
    """Project ``months`` steps of growth; returns ``months + 1`` points.

    Point ``i`` is recorded before growth is applied for step ``i``; the
    contribution for a step is added after that step's growth.
    """

    return list(_simulate(initial, monthly_contribution, months, annual_rate))


def compare_investments(
    initial: float,
    monthly_contribution: float,
    months: int,
    rates: Mapping[InvestmentType, float] | None = None,
) -> dict[InvestmentType, list[InvestmentPoint]]:
    """Run the projection once per investment type.

    ``rates`` overrides the default annual rate of any type it names.
    """

    overrides = dict(rates or {})
    return {
        kind: simulate_investment(
            initial, monthly_contribution, months, overrides.get(kind, info.rate)
        )
        for kind, info in INVESTMENT_RATES.items()
    }


@dataclass(frozen=True, slots=True)
class ProjectionTotals:
    final_value: float
    total_invested: float
    total_return: float
    return_percentage: float


def projection_totals(points: Sequence[InvestmentPoint]) -> ProjectionTotals:
    """Final value, principal, gain and gain percentage of a projection."""

    if not points:
        return ProjectionTotals(0.0, 0.0, 0.0, 0.0)
    last = points[-1]
    gain = last.value - last.invested
    pct = (gain / last.invested * 100) if last.invested > 0 else 0.0
    return ProjectionTotals(
        final_value=last.value,
        total_invested=last.invested,
        total_return=gain,
        return_percentage=pct,
    )


# ---------------------------------------------------------------------------
# Caller-side input clamping
# ---------------------------------------------------------------------------

MAX_INITIAL = 100_000.0
MAX_CONTRIBUTION = 5_000.0
MIN_MONTHS = 1
MAX_MONTHS = 360
MAX_RATE = 100.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class SimulationParams(BaseModel):
    """User-facing simulator inputs, clamped to the ranges the form allows.

    Non-numeric values are rejected by validation; numeric values outside the
    allowed range are pulled back to the nearest bound.
    """

    model_config = ConfigDict(frozen=True)

    initial: float = 10_000.0
    monthly_contribution: float = 500.0
    months: int = 24
    annual_rate: float = INVESTMENT_RATES["selic"].rate

    @field_validator("initial", "monthly_contribution", "annual_rate")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("value must be a finite number")
        return v

    @field_validator("initial")
    @classmethod
    def _clamp_initial(cls, v: float) -> float:
        return _clamp(v, 0.0, MAX_INITIAL)

    @field_validator("monthly_contribution")
    @classmethod
    def _clamp_contribution(cls, v: float) -> float:
        return _clamp(v, 0.0, MAX_CONTRIBUTION)

    @field_validator("months")
    @classmethod
    def _clamp_months(cls, v: int) -> int:
        return int(_clamp(v, MIN_MONTHS, MAX_MONTHS))

    @field_validator("annual_rate")
    @classmethod
    def _clamp_rate(cls, v: float) -> float:
        return _clamp(v, 0.0, MAX_RATE)

    def simulate(self) -> list[InvestmentPoint]:
        return simulate_investment(
            self.initial, self.monthly_contribution, self.months, self.annual_rate
        )


__all__ = [
    "INVESTMENT_RATES",
    "InvestmentRate",
    "InvestmentType",
    "ProjectionTotals",
    "SimulationParams",
    "compare_investments",
    "period_label",
    "projection_totals",
    "simulate_investment",
]
