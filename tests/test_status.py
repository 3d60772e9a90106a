from __future__ import annotations

import pytest

from initiative_status.data.status import (
    INITIATIVE_STATUSES,
    STATUS_DISPLAY,
    map_project_state,
    status_display,
)


@pytest.mark.parametrize(
    "state, expected",
    [
        ("started", "active"),
        ("backlog", "planned"),
        ("planned", "planned"),
        ("paused", "beta"),
        ("completed", "active"),
        ("canceled", "planned"),
    ],
)
def test_map_project_state_fixed_table(state, expected):
    assert map_project_state(state) == expected


def test_map_project_state_unknown_defaults_to_planned():
    assert map_project_state("triage") == "planned"
    assert map_project_state("") == "planned"
    assert map_project_state(None) == "planned"


def test_status_display_covers_vocabulary_and_falls_back():
    assert set(STATUS_DISPLAY) == set(INITIATIVE_STATUSES)
    assert status_display("beta").label == "Paused"
    assert status_display("in-development").label == "In Dev"
    assert status_display("mystery") == STATUS_DISPLAY["planned"]
