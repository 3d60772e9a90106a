"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from initiative_status.data.status import STATUS_DISPLAY

DEFAULT_TEMPLATE = "plotly_white"
STATUS_COLOR_MAP: Dict[str, str] = {status: display.color for status, display in STATUS_DISPLAY.items()}
PROGRESS_COLOR = "#3b82f6"
TODAY_COLOR = "#ef4444"


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    height: Optional[int] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        showlegend=False,
        margin=dict(l=40, r=20, t=60 if title else 20, b=40),
    )
    if height:
        fig.update_layout(height=height)
    if xaxis_title:
        fig.update_xaxes(title=xaxis_title)
    fig.update_yaxes(showgrid=False, title=None)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def status_breakdown_chart(breakdown: pd.DataFrame, title: Optional[str] = "Status Breakdown") -> go.Figure:
    fig = px.bar(
        breakdown,
        x="Initiatives",
        y="Status",
        color="status",
        orientation="h",
        color_discrete_map=STATUS_COLOR_MAP,
        text_auto=True,
    )
    fig = _configure_layout(fig, title, xaxis_title="Initiatives", height=260)
    fig.update_traces(textposition="outside", cliponaxis=False)
    return fig


def progress_chart(progress: pd.DataFrame, title: Optional[str] = "Progress") -> go.Figure:
    fig = px.bar(
        progress,
        x="completeness",
        y="name",
        orientation="h",
        text=progress["completeness"].map(lambda v: f"{v}%"),
    )
    fig.update_traces(marker_color=PROGRESS_COLOR, textposition="outside", cliponaxis=False)
    fig = _configure_layout(fig, title, xaxis_title="Complete (%)", height=max(260, 28 * len(progress) + 80))
    # Highest completeness on top
    fig.update_yaxes(autorange="reversed")
    fig.update_xaxes(range=[0, 110])
    return fig


def timeline_chart(timeline: pd.DataFrame, title: Optional[str] = "Timeline") -> go.Figure:
    fig = px.timeline(
        timeline,
        x_start="start",
        x_end="end",
        y="name",
        color="status",
        color_discrete_map=STATUS_COLOR_MAP,
        hover_data={"completeness": True, "status": True},
    )
    fig = _configure_layout(fig, title, height=max(260, 32 * len(timeline) + 100))
    fig.update_yaxes(autorange="reversed")

    window_start = timeline.attrs.get("window_start")
    window_end = timeline.attrs.get("window_end")
    if window_start is not None and window_end is not None:
        fig.update_xaxes(range=[window_start, window_end], dtick="M1", tickformat="%b %y")

    today = timeline.attrs.get("today")
    if today is not None:
        fig.add_vline(x=today.to_pydatetime(), line_width=1, line_dash="dot", line_color=TODAY_COLOR)
        fig.add_annotation(
            x=today.to_pydatetime(),
            y=1.02,
            yref="paper",
            text="today",
            showarrow=False,
            font=dict(color=TODAY_COLOR, size=10),
        )
    return fig
