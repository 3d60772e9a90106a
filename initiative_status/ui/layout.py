"""
Layout helpers for the Streamlit application (sidebar, header, footer).
"""

from __future__ import annotations

from typing import List, Sequence

import streamlit as st

from initiative_status.data.filters import DEFAULT_FILTERS, DashboardFilters
from initiative_status.data.initiatives import Initiative
from initiative_status.data.status import INITIATIVE_STATUSES, status_display

LINEAR_HOME_URL = "https://linear.app"


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title="Initiative Status",
        layout="wide",
        page_icon=":bar_chart:",
    )


def _status_options(initiatives: Sequence[Initiative]) -> List[str]:
    present = {initiative.status for initiative in initiatives}
    return [status for status in INITIATIVE_STATUSES if status in present]


def sidebar_filters_ui(
    initiatives: Sequence[Initiative], defaults: DashboardFilters = DEFAULT_FILTERS
) -> DashboardFilters:
    """
    Render the sidebar filter controls and return the selected values.
    """
    st.sidebar.header("Filters")

    options = _status_options(initiatives)
    counts = {status: sum(1 for i in initiatives if i.status == status) for status in options}
    selected = st.sidebar.multiselect(
        "Status",
        options=options,
        default=defaults.statuses if defaults.statuses is not None else options,
        key="is_status",
        format_func=lambda s: f"{status_display(s).label} ({counts.get(s, 0)})",
    )
    # Everything selected is the same as no status filter
    statuses = None if len(selected) == len(options) else selected

    search = st.sidebar.text_input(
        "Search",
        value=defaults.search,
        key="is_search",
        help="Match initiative names and descriptions.",
    )
    return DashboardFilters(statuses=statuses, search=search)


def render_error_notice() -> None:
    st.error("Could not load data from Linear. Showing empty state.", icon="⚠️")


def render_footer() -> None:
    st.divider()
    st.caption(
        f"Data sourced from [Linear]({LINEAR_HOME_URL}) · "
        "Refreshed every 5 minutes or on demand from the sidebar."
    )
