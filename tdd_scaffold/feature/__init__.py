"""Interactive feature wizard support."""

from .collector import FeatureRequest, build_narrative, collect_list, collect_requirements
from .issue import ISSUE_LABELS, issue_title, render_issue_body, render_issue_document

__all__ = [
    "FeatureRequest",
    "build_narrative",
    "collect_list",
    "collect_requirements",
    "ISSUE_LABELS",
    "issue_title",
    "render_issue_body",
    "render_issue_document",
]
