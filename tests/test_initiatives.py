from __future__ import annotations

import dataclasses

import pytest

from initiative_status.data.initiatives import (
    Initiative,
    average_completeness,
    project_to_initiative,
    round_half_up,
    slugify,
    sort_by_name,
    total_cost_estimate,
)


def _project(**overrides):
    project = {
        "id": "proj-1",
        "name": "Puppet Theatre",
        "description": None,
        "content": None,
        "state": "started",
        "progress": 0.42,
        "startDate": "2025-01-15",
        "targetDate": "2025-06-30",
        "url": "https://api.example/p/1",
        "createdAt": "2024-12-01T10:00:00.000Z",
        "updatedAt": "2025-02-01T10:00:00.000Z",
        "issues": {"nodes": []},
    }
    project.update(overrides)
    return project


def test_project_to_initiative_end_to_end():
    initiative = project_to_initiative(
        _project(content="A stage for puppets.\n<!-- meta\ncost_estimate: 1200\n-->")
    )

    assert initiative.status == "active"
    assert initiative.completeness == 42
    assert initiative.cost_estimate == 1200
    assert initiative.url == "https://api.example/p/1"
    assert initiative.description == "A stage for puppets."
    assert initiative.slug == "puppet-theatre"
    assert initiative.start_date == "2025-01-15"
    assert initiative.target_date == "2025-06-30"
    assert initiative.created_at == "2024-12-01T10:00:00.000Z"


def test_project_to_initiative_maps_meta_fields():
    content = """<!-- meta
url: [https://puppet.example](<https://puppet.example>)
opencollective_slug: puppet
opencollective_type: collective
subdomain: puppet
page_path: /puppet
-->"""

    initiative = project_to_initiative(_project(content=content))

    assert initiative.url == "https://puppet.example"
    assert initiative.opencollective_slug == "puppet"
    assert initiative.opencollective_type == "collective"
    assert initiative.subdomain == "puppet"
    assert initiative.page_path == "/puppet"
    assert initiative.cost_estimate == 0


def test_project_to_initiative_nullable_meta_defaults():
    initiative = project_to_initiative(_project())

    assert initiative.page_path is None
    assert initiative.subdomain is None
    assert initiative.opencollective_slug is None
    assert initiative.opencollective_type is None
    assert initiative.cost_estimate == 0


def test_description_fallback_chain():
    with_description = project_to_initiative(_project(description="Short", content="Long body"))
    with_body = project_to_initiative(_project(description="", content="Long body"))
    name_only = project_to_initiative(_project(description=None, content="<!-- meta\nurl: x\n-->"))

    assert with_description.description == "Short"
    assert with_body.description == "Long body"
    assert name_only.description == "Puppet Theatre"


def test_project_to_initiative_aggregates_issues():
    issues = {
        "nodes": [
            {"id": "1", "title": "Stage built", "state": {"type": "completed", "name": "Done"}},
            {"id": "2", "title": "Rehearse", "state": {"type": "started", "name": "In Progress"}},
            {"id": "3", "title": "Dropped", "state": {"type": "canceled", "name": "Canceled"}},
        ]
    }

    initiative = project_to_initiative(_project(issues=issues))

    assert initiative.features == ("Stage built",)
    assert initiative.next_milestones == ("Rehearse",)
    assert initiative.issue_count == 3
    assert initiative.completed_issue_count == 1


def test_completeness_rounds_half_up():
    assert project_to_initiative(_project(progress=0.125)).completeness == 13
    assert project_to_initiative(_project(progress=1)).completeness == 100
    assert project_to_initiative(_project(progress=0)).completeness == 0


def test_completeness_is_not_clamped_for_out_of_range_progress():
    # Linear should never send these; values pass through unchanged
    assert project_to_initiative(_project(progress=1.3)).completeness == 130
    assert project_to_initiative(_project(progress=-0.2)).completeness == -20


def test_initiative_is_immutable():
    initiative = project_to_initiative(_project())

    with pytest.raises(dataclasses.FrozenInstanceError):
        initiative.name = "Renamed"  # type: ignore[misc]


def test_to_dict_uses_lists_for_sequences():
    data = project_to_initiative(_project()).to_dict()

    assert data["features"] == []
    assert data["next_milestones"] == []
    assert data["slug"] == "puppet-theatre"


@pytest.mark.parametrize(
    "name, slug",
    [
        ("Puppet Theatre", "puppet-theatre"),
        ("  Hello,  World!  ", "hello-world"),
        ("AI/ML -- Research (2025)", "ai-ml-research-2025"),
        ("---", ""),
        ("Café Society", "caf-society"),
    ],
)
def test_slugify(name, slug):
    assert slugify(name) == slug


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(13.5) == 14
    assert round_half_up(42.00000000000001) == 42
    assert round_half_up(41.4) == 41


def _initiative(name: str, completeness: int = 0, cost_estimate: int = 0) -> Initiative:
    return dataclasses.replace(
        project_to_initiative(_project(name=name)),
        completeness=completeness,
        cost_estimate=cost_estimate,
    )


def test_sort_by_name_is_case_insensitive():
    names = [i.name for i in sort_by_name([_initiative("beta"), _initiative("Alpha"), _initiative("alpha two")])]

    assert names == ["Alpha", "alpha two", "beta"]


def test_metric_folds():
    initiatives = [
        _initiative("A", completeness=10, cost_estimate=1000),
        _initiative("B", completeness=25, cost_estimate=0),
        _initiative("C", completeness=30, cost_estimate=250),
    ]

    assert total_cost_estimate(initiatives) == 1250
    assert average_completeness(initiatives) == 22  # 65 / 3 = 21.67


def test_average_completeness_of_empty_list_is_zero():
    assert average_completeness([]) == 0
    assert total_cost_estimate([]) == 0
