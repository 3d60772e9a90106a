from __future__ import annotations

from typing import List, Sequence

import streamlit as st

from initiative_status.data.frame import progress_table, status_breakdown
from initiative_status.data.initiatives import Initiative, average_completeness, total_cost_estimate
from initiative_status.data.status import ACTIVE
from initiative_status.ui.components.charts import progress_chart, render_plotly, status_breakdown_chart
from initiative_status.ui.components.formatting import format_currency, format_percent, format_ratio
from initiative_status.ui.components.kpi import KpiCard
from initiative_status.ui.pages.context import PageContext


def build_kpis(initiatives: Sequence[Initiative]) -> List[KpiCard]:
    """Headline figures, all folded from one fetched list."""
    total = len(initiatives)
    active = sum(1 for i in initiatives if i.status == ACTIVE)
    issues = sum(i.issue_count for i in initiatives)
    completed = sum(i.completed_issue_count for i in initiatives)
    return [
        KpiCard(label="Initiatives", value=total),
        KpiCard(label="Avg Progress", value_display=format_percent(average_completeness(initiatives))),
        KpiCard(label="Est. Total Cost", value_display=format_currency(total_cost_estimate(initiatives))),
        KpiCard(label="Issues", value_display=format_ratio(completed, issues), help_text="completed / total"),
        KpiCard(label="Active", value=active, help_text=f"of {total}"),
    ]


def render(initiatives: List[Initiative], context: PageContext) -> None:
    if not initiatives:
        st.info("No initiatives match the current filters.")
        return

    left, right = st.columns(2)
    with left:
        render_plotly(status_breakdown_chart(status_breakdown(context.frame)))
    with right:
        render_plotly(progress_chart(progress_table(context.frame)))
