"""Test scaffold generation for Vue components."""

from .assembler import assemble
from .assistant import generate_assistant_scaffold
from .models import AccessibilityFocus, CaseCategory, CaseContext, infer_accessibility_focus
from .naming import is_valid_component_name, normalize_test_name
from .orchestrator import build_case, wrap_case
from .scaffold import generate_scaffold
from .sections import build_accessibility_section, build_section
from .stub import container_test_id, render_component_stub

__all__ = [
    "assemble",
    "build_case",
    "wrap_case",
    "build_section",
    "build_accessibility_section",
    "generate_scaffold",
    "generate_assistant_scaffold",
    "AccessibilityFocus",
    "CaseCategory",
    "CaseContext",
    "infer_accessibility_focus",
    "is_valid_component_name",
    "normalize_test_name",
    "container_test_id",
    "render_component_stub",
]
