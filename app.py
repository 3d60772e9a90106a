import initiative_status.bootstrap_env  # must be first to set env/secrets
import logging
import os
from typing import List

import streamlit as st

from initiative_status.config import TABS
from initiative_status.data.exceptions import InitiativeSourceError
from initiative_status.data.filters import DashboardFilters, apply_filters, serialize_filters
from initiative_status.data.frame import initiatives_to_frame
from initiative_status.data.initiatives import Initiative
from initiative_status.data.loader import clear_initiatives_cache, load_initiatives
from initiative_status.data.status import status_display
from initiative_status.ui.components.kpi import render_kpi_cards
from initiative_status.ui.layout import render_error_notice, render_footer, setup_page, sidebar_filters_ui
from initiative_status.ui.pages import (
    data,
    initiatives as initiative_cards,
    overview,
    timeline,
)
from initiative_status.ui.pages.context import PageContext

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


PAGE_RENDERERS = {
    "overview": overview.render,
    "timeline": timeline.render,
    "initiatives": initiative_cards.render,
    "data": data.render,
}


def _active_filter_summary(filters: DashboardFilters, shown: int, total: int) -> None:
    badges = []
    if filters.statuses is not None:
        badges.append("Status: " + (", ".join(status_display(s).label for s in filters.statuses) or "none"))
    if filters.search.strip():
        badges.append(f"Search: “{filters.search.strip()}”")
    if not badges:
        return
    st.markdown("**Active Filters: " + " | ".join(badges) + "**")
    st.caption(f"Showing {shown} of {total} initiatives.")


def _load() -> tuple[List[Initiative], bool]:
    """Fetch initiatives; any source error degrades to an empty list."""
    try:
        return load_initiatives(), False
    except InitiativeSourceError:
        logger.exception("Failed to load initiatives from Linear")
        return [], True


def main() -> None:
    setup_page()
    st.title("Initiative Status Dashboard")

    if st.sidebar.button("🔄 Refresh Data"):
        clear_initiatives_cache()

    all_initiatives, failed = _load()
    if failed:
        render_error_notice()

    # Headline figures always describe the full portfolio
    render_kpi_cards(overview.build_kpis(all_initiatives))

    filters = sidebar_filters_ui(all_initiatives)
    st.session_state["is_active_filters"] = serialize_filters(filters)
    filtered = apply_filters(all_initiatives, filters)
    _active_filter_summary(filters, len(filtered), len(all_initiatives))

    context = PageContext(
        all_initiatives=all_initiatives,
        frame=initiatives_to_frame(filtered),
        filters=filters,
    )

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(filtered, context)

    render_footer()


if __name__ == "__main__":
    main()
