"""
Mapping from Linear project states to the dashboard's status vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

ACTIVE = "active"
IN_DEVELOPMENT = "in-development"
PLANNED = "planned"
BETA = "beta"

INITIATIVE_STATUSES = (ACTIVE, IN_DEVELOPMENT, PLANNED, BETA)

# Shipping and shipped both read as active; paused is shown as beta.
PROJECT_STATE_MAP: Dict[str, str] = {
    "started": ACTIVE,
    "backlog": PLANNED,
    "planned": PLANNED,
    "paused": BETA,
    "completed": ACTIVE,
    "canceled": PLANNED,
}


def map_project_state(state: Optional[str]) -> str:
    return PROJECT_STATE_MAP.get(state, PLANNED)


@dataclass(frozen=True)
class StatusDisplay:
    label: str
    color: str


STATUS_DISPLAY: Dict[str, StatusDisplay] = {
    ACTIVE: StatusDisplay("Active", "#10b981"),
    IN_DEVELOPMENT: StatusDisplay("In Dev", "#3b82f6"),
    BETA: StatusDisplay("Paused", "#f59e0b"),
    PLANNED: StatusDisplay("Planned", "#64748b"),
}


def status_display(status: str) -> StatusDisplay:
    return STATUS_DISPLAY.get(status, STATUS_DISPLAY[PLANNED])
