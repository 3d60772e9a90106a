"""
Aggregation of a project's issues into completed features and upcoming work.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple

MAX_FEATURES = 10
MAX_MILESTONES = 5

COMPLETED_TYPES = {"completed"}
OPEN_TYPES = {"started", "unstarted"}


@dataclass(frozen=True)
class IssueSummary:
    features: Tuple[str, ...]
    next_milestones: Tuple[str, ...]
    issue_count: int
    completed_issue_count: int


def _state_type(issue: Mapping[str, Any]) -> Optional[str]:
    state = issue.get("state") or {}
    return state.get("type")


def aggregate_issues(issues: Optional[Iterable[Mapping[str, Any]]]) -> IssueSummary:
    """Partition issues by workflow state type, keeping the API's ordering.

    Issues whose type is neither completed nor started/unstarted (triage,
    canceled, missing state) count towards `issue_count` only.
    """
    completed: List[str] = []
    upcoming: List[str] = []
    total = 0
    for issue in issues or ():
        total += 1
        state_type = _state_type(issue)
        if state_type in COMPLETED_TYPES:
            completed.append(issue.get("title", ""))
        elif state_type in OPEN_TYPES:
            upcoming.append(issue.get("title", ""))

    return IssueSummary(
        features=tuple(completed[:MAX_FEATURES]),
        next_milestones=tuple(upcoming[:MAX_MILESTONES]),
        issue_count=total,
        completed_issue_count=len(completed),
    )
