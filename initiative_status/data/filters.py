"""
Filter utilities that apply the sidebar filters to the initiative list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from initiative_status.data.initiatives import Initiative


@dataclass
class DashboardFilters:
    statuses: Optional[List[str]]
    search: str


DEFAULT_FILTERS = DashboardFilters(statuses=None, search="")


def apply_filters(initiatives: Sequence[Initiative], filters: DashboardFilters) -> List[Initiative]:
    """
    Keep initiatives matching the selected statuses and the free-text search.

    The search is case-insensitive over name and description. `statuses=None`
    keeps every status, an empty list keeps none.
    """
    filtered = list(initiatives)

    if filters.statuses is not None:
        allowed = set(filters.statuses)
        filtered = [i for i in filtered if i.status in allowed]

    needle = filters.search.strip().casefold()
    if needle:
        filtered = [
            i for i in filtered
            if needle in i.name.casefold() or needle in i.description.casefold()
        ]

    return filtered


def serialize_filters(filters: DashboardFilters) -> Dict[str, Any]:
    """
    Convert the DashboardFilters dataclass to a JSON-serialisable dictionary to
    be stored in session_state or used for logging/debugging.
    """
    return {
        "statuses": filters.statuses,
        "search": filters.search,
    }
