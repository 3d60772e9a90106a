"""
Utility helpers for formatting numeric values, currency strings, and percentages.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

SCALE_FACTORS = [
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
]


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def _scale_value(value: float):
    for factor, suffix in SCALE_FACTORS:
        if abs(value) >= factor:
            return value / factor, suffix
    return value, ""


def format_currency(
    value: Optional[float],
    symbol: str = "$",
    decimals: int = 0,
    compact: bool = False,
) -> str:
    if value is None:
        return "–"
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return "–"

    suffix = ""
    display_value = numeric
    if compact:
        display_value, suffix = _scale_value(numeric)
    formatted = f"{display_value:,.{decimals}f}"
    return f"{symbol}{formatted}{suffix}"


def format_percent(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "–"


def format_ratio(done: int, total: int) -> str:
    return f"{done}/{total}"


def format_month(value: Optional[str]) -> Optional[str]:
    """Render an ISO date as e.g. 'Mar 2025'; None when missing or unparseable."""
    if not value:
        return None
    try:
        parsed = dt.date.fromisoformat(value[:10])
    except ValueError:
        return None
    return parsed.strftime("%b %Y")
