from __future__ import annotations

from typing import List

import streamlit as st

from initiative_status.data.frame import timeline_frame
from initiative_status.data.initiatives import Initiative
from initiative_status.ui.components.charts import render_plotly, timeline_chart
from initiative_status.ui.pages.context import PageContext


def render(initiatives: List[Initiative], context: PageContext) -> None:
    st.subheader("Timeline")
    timeline = timeline_frame(context.frame)
    if timeline.empty:
        st.info("No initiatives have a start or target date yet.")
        return
    render_plotly(timeline_chart(timeline, title=None))
    st.caption("Bars run from start to target date; a missing start is drawn from today.")
