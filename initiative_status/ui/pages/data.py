from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from initiative_status.data.initiatives import Initiative
from initiative_status.ui.components.tables import render_table
from initiative_status.ui.pages.context import PageContext

TABLE_COLUMNS = [
    "name",
    "status",
    "completeness",
    "cost_estimate",
    "completed_issue_count",
    "issue_count",
    "start_date",
    "target_date",
    "page_path",
    "subdomain",
    "opencollective_slug",
    "url",
]

COLUMN_CONFIG = {
    "completeness": {"type": "percent"},
    "cost_estimate": {"type": "currency"},
}


def initiatives_table(initiatives: List[Initiative]) -> pd.DataFrame:
    rows = [initiative.to_dict() for initiative in initiatives]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def render(initiatives: List[Initiative], context: PageContext) -> None:
    st.subheader("Data")
    render_table(initiatives_table(initiatives), column_config=COLUMN_CONFIG)
