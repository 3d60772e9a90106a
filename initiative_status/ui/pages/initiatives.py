from __future__ import annotations

from typing import List

import streamlit as st

from initiative_status.data.initiatives import Initiative
from initiative_status.data.status import status_display
from initiative_status.ui.components.formatting import format_currency, format_month, format_ratio
from initiative_status.ui.pages.context import PageContext

CARD_COLUMNS = 3
FEATURES_SHOWN = 3
MILESTONES_SHOWN = 2


def _meta_line(initiative: Initiative) -> str:
    parts = []
    if initiative.issue_count > 0:
        parts.append(f"{format_ratio(initiative.completed_issue_count, initiative.issue_count)} issues")
    if initiative.cost_estimate > 0:
        parts.append(format_currency(initiative.cost_estimate))
    start = format_month(initiative.start_date)
    if start:
        parts.append(start)
    return " · ".join(parts)


def render_card(initiative: Initiative) -> None:
    display = status_display(initiative.status)
    with st.container(border=True):
        if initiative.url.startswith("http"):
            st.markdown(f"#### [{initiative.name}]({initiative.url})")
        else:
            st.markdown(f"#### {initiative.name}")
        st.markdown(
            f"<span style='background:{display.color};color:#fff;padding:1px 8px;"
            f"border-radius:999px;font-size:0.7rem;font-weight:700'>{display.label}</span>",
            unsafe_allow_html=True,
        )
        st.write(initiative.description)

        meta_line = _meta_line(initiative)
        if meta_line:
            st.caption(meta_line)

        st.progress(max(0, min(initiative.completeness, 100)), text=f"Progress {initiative.completeness}%")

        if initiative.features:
            st.markdown("**Completed**")
            for feature in initiative.features[:FEATURES_SHOWN]:
                st.markdown(f"- {feature}")
            remaining = len(initiative.features) - FEATURES_SHOWN
            if remaining > 0:
                st.caption(f"+{remaining} more")

        if initiative.next_milestones:
            st.markdown("**Next**")
            for milestone in initiative.next_milestones[:MILESTONES_SHOWN]:
                st.markdown(f"- {milestone}")


def render(initiatives: List[Initiative], context: PageContext) -> None:
    st.subheader("All Initiatives")
    if not initiatives:
        st.info("No initiatives match the current filters.")
        return

    for idx in range(0, len(initiatives), CARD_COLUMNS):
        row = initiatives[idx: idx + CARD_COLUMNS]
        for col, initiative in zip(st.columns(CARD_COLUMNS), row):
            with col:
                render_card(initiative)
