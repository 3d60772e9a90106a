"""Quick validation script for initiative normalization.

Run with `python scripts/validate_initiatives.py` to ensure a sample Linear
project node produces the expected initiative fields.
"""

from __future__ import annotations

from initiative_status.data.initiatives import project_to_initiative


def main() -> None:
    sample = {
        "id": "3f1c",
        "name": "Puppet Theatre",
        "description": "",
        "content": (
            "Open-air puppet shows.\n\n"
            "<!-- meta\n"
            "url: [https://puppet.inquiry.institute](<https://puppet.inquiry.institute>)\n"
            "cost_estimate: 5000\n"
            "subdomain: puppet\n"
            "page_path: /puppet\n"
            "-->\n"
        ),
        "state": "started",
        "progress": 0.42,
        "startDate": "2025-01-15",
        "targetDate": None,
        "url": "https://linear.app/inquiry/project/puppet-theatre",
        "createdAt": "2024-12-01T10:00:00.000Z",
        "updatedAt": "2025-02-01T10:00:00.000Z",
        "issues": {
            "nodes": [
                {"id": "1", "title": "Build stage", "state": {"type": "completed", "name": "Done"}},
                {"id": "2", "title": "First rehearsal", "state": {"type": "started", "name": "In Progress"}},
                {"id": "3", "title": "Sort out lighting", "state": {"type": "triage", "name": "Triage"}},
            ]
        },
    }

    initiative = project_to_initiative(sample)
    expected = {
        "slug": "puppet-theatre",
        "description": "Open-air puppet shows.",
        "url": "https://puppet.inquiry.institute",
        "status": "active",
        "completeness": 42,
        "cost_estimate": 5000,
        "issue_count": 3,
        "completed_issue_count": 1,
    }

    mismatched = {
        key: (getattr(initiative, key), value)
        for key, value in expected.items()
        if getattr(initiative, key) != value
    }
    if mismatched:
        raise SystemExit(f"Unexpected initiative fields (got, expected): {mismatched}")

    print("Initiative validation passed:", initiative.slug)


if __name__ == "__main__":
    main()
