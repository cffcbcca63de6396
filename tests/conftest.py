"""Pytest configuration shared across the suite.

Keeps tests hermetic with respect to environment configuration (upload limit
and log level) and exposes the bundled sample as a fixture.
"""

from __future__ import annotations

import pytest

from finance_insights import SAMPLE_CSV, analyze_csv
from finance_insights.models import FinanceReport


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FI_MAX_UPLOAD_BYTES", raising=False)
    monkeypatch.delenv("FINANCE_INSIGHTS_LOG_LEVEL", raising=False)


@pytest.fixture
def sample_report() -> FinanceReport:
    return analyze_csv(SAMPLE_CSV)
