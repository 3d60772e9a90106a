from __future__ import annotations

from initiative_status.ui.components.formatting import (
    format_currency,
    format_month,
    format_number,
    format_percent,
    format_ratio,
)


def test_format_currency():
    assert format_currency(12500) == "$12,500"
    assert format_currency(2_500_000, compact=True, decimals=1) == "$2.5M"
    assert format_currency(None) == "–"
    assert format_currency("n/a") == "–"


def test_format_number_and_percent():
    assert format_number(1234.567, decimals=1) == "1,234.6"
    assert format_number(None) == "–"
    assert format_percent(42) == "42%"
    assert format_percent(None) == "–"


def test_format_ratio():
    assert format_ratio(3, 7) == "3/7"


def test_format_month():
    assert format_month("2025-03-14") == "Mar 2025"
    assert format_month("2025-03-14T10:00:00.000Z") == "Mar 2025"
    assert format_month(None) is None
    assert format_month("soon") is None
