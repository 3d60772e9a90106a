from __future__ import annotations

from initiative_status.data.issues import aggregate_issues


def _issue(title: str, state_type):
    state = {"type": state_type, "name": str(state_type).title()} if state_type else None
    return {"id": title, "title": title, "state": state, "completedAt": None}


def test_aggregate_issues_partitions_by_state_type():
    issues = [
        _issue("Ship v1", "completed"),
        _issue("Ship docs", "completed"),
        _issue("Build v2", "started"),
        _issue("Plan v3", "unstarted"),
        _issue("Look at bug", "triage"),
    ]

    summary = aggregate_issues(issues)

    assert summary.completed_issue_count == 2
    assert summary.issue_count == 5
    assert summary.features == ("Ship v1", "Ship docs")
    assert summary.next_milestones == ("Build v2", "Plan v3")
    assert "Look at bug" not in summary.features + summary.next_milestones


def test_aggregate_issues_caps_lists_but_not_counts():
    issues = [_issue(f"done {n}", "completed") for n in range(12)]
    issues += [_issue(f"todo {n}", "unstarted") for n in range(7)]

    summary = aggregate_issues(issues)

    assert summary.features == tuple(f"done {n}" for n in range(10))
    assert summary.next_milestones == tuple(f"todo {n}" for n in range(5))
    assert summary.completed_issue_count == 12
    assert summary.issue_count == 19


def test_aggregate_issues_keeps_source_order_across_types():
    issues = [
        _issue("b", "unstarted"),
        _issue("a", "started"),
        _issue("z", "completed"),
        _issue("y", "completed"),
    ]

    summary = aggregate_issues(issues)

    assert summary.next_milestones == ("b", "a")
    assert summary.features == ("z", "y")


def test_aggregate_issues_counts_issues_without_state():
    summary = aggregate_issues([_issue("orphan", None), _issue("gone", "canceled")])

    assert summary.issue_count == 2
    assert summary.completed_issue_count == 0
    assert summary.features == ()
    assert summary.next_milestones == ()


def test_aggregate_issues_empty_input():
    for issues in (None, []):
        summary = aggregate_issues(issues)
        assert summary.issue_count == 0
        assert summary.features == ()
