"""
Assembly of the canonical `Initiative` record from a Linear project node.

Each Linear project maps to exactly one initiative. The assembler is pure: it
combines the parsed metadata block, the mapped status and the issue summary
with the project's own fields, and performs no I/O.
"""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from initiative_status.data.issues import aggregate_issues
from initiative_status.data.meta import parse_meta
from initiative_status.data.status import map_project_state

SLUG_SEPARATOR_REGEX = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class Initiative:
    id: str
    slug: str
    name: str
    description: str
    url: str
    page_path: Optional[str]
    subdomain: Optional[str]
    completeness: int
    cost_estimate: int
    opencollective_slug: Optional[str]
    opencollective_type: Optional[str]
    status: str
    features: Tuple[str, ...]
    next_milestones: Tuple[str, ...]
    start_date: Optional[str]
    target_date: Optional[str]
    issue_count: int
    completed_issue_count: int
    created_at: Optional[str]
    updated_at: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["features"] = list(self.features)
        data["next_milestones"] = list(self.next_milestones)
        return data


def round_half_up(value: float) -> int:
    """Round .5 upwards instead of to the nearest even integer."""
    return int(math.floor(value + 0.5))


def slugify(name: str) -> str:
    return SLUG_SEPARATOR_REGEX.sub("-", name.lower()).strip("-")


def project_to_initiative(project: Mapping[str, Any]) -> Initiative:
    # Metadata lives in `content`; `description` is Linear's short summary
    meta, body = parse_meta(project.get("content"))
    name = project.get("name") or ""
    issues = aggregate_issues((project.get("issues") or {}).get("nodes"))

    return Initiative(
        id=project["id"],
        slug=slugify(name),
        name=name,
        description=project.get("description") or body or name,
        url=meta.url or project.get("url") or "",
        page_path=meta.page_path or None,
        subdomain=meta.subdomain or None,
        completeness=round_half_up((project.get("progress") or 0) * 100),
        cost_estimate=round_half_up(meta.cost_estimate) if meta.cost_estimate else 0,
        opencollective_slug=meta.opencollective_slug or None,
        opencollective_type=meta.opencollective_type or None,
        status=map_project_state(project.get("state")),
        features=issues.features,
        next_milestones=issues.next_milestones,
        start_date=project.get("startDate"),
        target_date=project.get("targetDate"),
        issue_count=issues.issue_count,
        completed_issue_count=issues.completed_issue_count,
        created_at=project.get("createdAt"),
        updated_at=project.get("updatedAt"),
    )


def sort_by_name(initiatives: Iterable[Initiative]) -> list[Initiative]:
    return sorted(initiatives, key=lambda initiative: initiative.name.casefold())


def total_cost_estimate(initiatives: Sequence[Initiative]) -> int:
    return sum(initiative.cost_estimate for initiative in initiatives)


def average_completeness(initiatives: Sequence[Initiative]) -> int:
    if not initiatives:
        return 0
    total = sum(initiative.completeness for initiative in initiatives)
    return round_half_up(total / len(initiatives))
