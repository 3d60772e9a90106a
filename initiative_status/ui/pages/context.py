from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pandas as pd

from initiative_status.data.filters import DashboardFilters
from initiative_status.data.initiatives import Initiative


@dataclass
class PageContext:
    all_initiatives: List[Initiative]
    frame: pd.DataFrame
    filters: DashboardFilters
