"""
pandas views over the initiative list used by the dashboard charts and tables.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Optional, Sequence

import pandas as pd

from initiative_status.data.initiatives import Initiative
from initiative_status.data.status import status_display

FRAME_COLUMNS = [f.name for f in fields(Initiative)]
TIMELINE_PAD_BEFORE = pd.Timedelta(days=30)
TIMELINE_PAD_AFTER = pd.Timedelta(days=60)


def initiatives_to_frame(initiatives: Sequence[Initiative]) -> pd.DataFrame:
    """Flatten initiatives into one row each, parsing the date columns."""
    if not initiatives:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    df = pd.DataFrame([initiative.to_dict() for initiative in initiatives], columns=FRAME_COLUMNS)
    for col in ("start_date", "target_date"):
        df[col] = pd.to_datetime(df[col], errors="coerce")
    df["status_label"] = df["status"].map(lambda s: status_display(s).label)
    return df


def status_breakdown(df: pd.DataFrame) -> pd.DataFrame:
    """Initiative counts per status, in order of first appearance."""
    if df.empty:
        return pd.DataFrame(columns=["status", "Status", "Initiatives", "Share"])
    grouped = df.groupby("status", sort=False).size().reset_index(name="Initiatives")
    grouped["Status"] = grouped["status"].map(lambda s: status_display(s).label)
    grouped["Share"] = grouped["Initiatives"] / grouped["Initiatives"].sum() * 100
    return grouped[["status", "Status", "Initiatives", "Share"]]


def progress_table(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return pd.DataFrame(columns=["name", "completeness", "status"])
    return (
        df[["name", "completeness", "status"]]
        .sort_values("completeness", ascending=False, kind="stable")
        .reset_index(drop=True)
    )


def timeline_frame(df: pd.DataFrame, today: Optional[pd.Timestamp] = None) -> pd.DataFrame:
    """Bars for initiatives with a start or target date.

    The window spans every known date plus today, padded 30 days before and 60
    days after. A missing start is drawn from today, a missing target runs to
    the end of the window. `window_start`/`window_end` are stored in attrs.
    """
    today = (today or pd.Timestamp.now()).normalize()
    columns = ["name", "status", "start", "end", "completeness"]
    if df.empty:
        return pd.DataFrame(columns=columns)

    dated = df[df["start_date"].notna() | df["target_date"].notna()]
    if dated.empty:
        return pd.DataFrame(columns=columns)

    known = pd.concat([dated["start_date"], dated["target_date"]]).dropna()
    window_start = min(known.min(), today) - TIMELINE_PAD_BEFORE
    window_end = max(known.max(), today) + TIMELINE_PAD_AFTER

    timeline = pd.DataFrame(
        {
            "name": dated["name"],
            "status": dated["status"],
            "start": dated["start_date"].fillna(today),
            "end": dated["target_date"].fillna(window_end),
            "completeness": dated["completeness"],
        }
    ).reset_index(drop=True)
    timeline.attrs["window_start"] = window_start
    timeline.attrs["window_end"] = window_end
    timeline.attrs["today"] = today
    return timeline
