"""Markdown issue body for a feature request."""

from .collector import FeatureRequest

ISSUE_LABELS = ("feature-request", "tdd", "enhancement")


def issue_title(request: FeatureRequest) -> str:
    return f"[FEATURE] {request.component_name} - {request.description}"


def _checklist(items: list[str]) -> str:
    if not items:
        return "- [ ] _None specified_"
    return "\n".join(f"- [ ] {item}" for item in items)


def _format_events(events: str | None) -> str:
    if not events:
        return "None"
    return ", ".join(f"@{name.strip()}" for name in events.split(",") if name.strip())


def render_issue_body(request: FeatureRequest) -> str:
    """Render the issue body with story, criteria, details and scenarios."""
    req = request.requirements
    return f"""## User Story
{req.narrative}

## Acceptance Criteria
{_checklist(req.acceptance_criteria)}

## Component Details
**Component Name**: {request.component_name}
**Props**: {req.props or "None"}
**Events**: {_format_events(req.events)}

## Test Scenarios
### Happy Path
{_checklist(req.happy_path)}

### Edge Cases
{_checklist(req.edge_cases)}

### Error Cases
{_checklist(req.error_cases)}
"""


def render_issue_document(request: FeatureRequest) -> str:
    """Issue body with a front-matter block, ready to save as Markdown."""
    return (
        "---\n"
        f"title: {issue_title(request)}\n"
        f"labels: {', '.join(ISSUE_LABELS)}\n"
        "---\n\n"
        f"{render_issue_body(request)}"
    )
