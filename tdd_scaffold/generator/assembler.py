"""Assembly of a complete component test file."""

import logging
from typing import TYPE_CHECKING

from ..constants import COMPONENT_FILE_SUFFIX, RENDER_HELPER_MODULE
from ..requirements.errors import InvalidComponentNameError, InvalidRequirementsError
from ..requirements.models import GenerationOptions, Requirements
from ..validators.requirements import validate_requirements
from .models import SECTION_TITLES, CaseCategory, single_line
from .naming import is_valid_component_name
from .sections import build_accessibility_section, build_section

if TYPE_CHECKING:
    from ..remote.generator import RemoteGenerator

logger = logging.getLogger(__name__)

GENERATOR_NAME = "tdd-scaffold"

# (category, requirements field) in output order
SCENARIO_SECTIONS = (
    (CaseCategory.ACCEPTANCE, "acceptance_criteria"),
    (CaseCategory.HAPPY, "happy_path"),
    (CaseCategory.EDGE, "edge_cases"),
    (CaseCategory.ERROR, "error_cases"),
)


def assemble(
    subject_name: str,
    requirements: Requirements,
    options: GenerationOptions | None = None,
    remote: "RemoteGenerator | None" = None,
) -> str:
    """Generate the complete test source for a component.

    Sections appear in the order acceptance, happy path, edge cases, error
    handling, accessibility; empty scenario lists are skipped and the
    accessibility section is always present.

    Args:
        subject_name: PascalCase component name.
        requirements: The feature requirements.
        options: Generation options; defaults to local standard scaffolds.
        remote: Remote generator to use when ``options.use_remote`` is set.
            If omitted, one is created for this call and closed afterwards.

    Returns:
        The test file source, ending with a newline.

    Raises:
        InvalidComponentNameError: If the name is not PascalCase.
        InvalidRequirementsError: If the requirements fail validation.
    """
    if not is_valid_component_name(subject_name):
        raise InvalidComponentNameError(subject_name)

    validation = validate_requirements(requirements)
    if not validation.valid:
        raise InvalidRequirementsError(validation.errors)

    options = options or GenerationOptions()

    owned_remote = None
    if options.use_remote and remote is None:
        owned_remote = remote = _create_remote()

    try:
        sections = _build_sections(subject_name, requirements, options, remote)
    finally:
        if owned_remote is not None:
            owned_remote.close()

    logger.info(
        "Generated %d section(s) for %s (%d scenario(s))",
        len(sections),
        subject_name,
        requirements.total_scenarios,
    )

    parts = [
        build_header(subject_name, requirements, options),
        build_imports(subject_name),
        build_body(subject_name, sections),
    ]
    return "\n\n".join(parts) + "\n"


def _create_remote() -> "RemoteGenerator":
    from ..remote.generator import RemoteGenerator, check_remote_config

    status = check_remote_config()
    if status.configured:
        logger.info("Remote test generation enabled (%s)", status.message)
    else:
        logger.warning(
            "Remote generation requested but unavailable: %s Falling back to local scaffolds.",
            status.message,
        )
    return RemoteGenerator()


def _build_sections(
    subject_name: str,
    requirements: Requirements,
    options: GenerationOptions,
    remote: "RemoteGenerator | None",
) -> list[str]:
    sections = []
    for category, field_name in SCENARIO_SECTIONS:
        scenarios = getattr(requirements, field_name)
        if not scenarios:
            continue
        sections.append(
            build_section(
                SECTION_TITLES[category],
                scenarios,
                subject_name,
                category,
                options,
                requirements=requirements,
                remote=remote,
            )
        )

    sections.append(
        build_accessibility_section(subject_name, options, requirements=requirements, remote=remote)
    )
    return sections


def build_header(
    subject_name: str,
    requirements: Requirements,
    options: GenerationOptions,
) -> str:
    """Build the leading doc comment."""
    lines = ["/**", f" * {subject_name} Component Tests"]
    if options.issue is not None:
        title = doc_comment_text(options.issue.title)
        lines.append(f" * GitHub Issue #{options.issue.number}: {title}")
    else:
        lines.append(f" * Auto-generated by {GENERATOR_NAME}")
    lines.extend(
        [
            " *",
            f" * User Story: {doc_comment_text(requirements.narrative)}",
            " *",
            " * This test file follows TDD approach - all tests should fail initially (Red phase)",
            " */",
        ]
    )
    return "\n".join(lines)


def doc_comment_text(text: str) -> str:
    """Flatten text for one doc-comment line so it cannot close the comment."""
    return single_line(text).replace("*/", "*\\/")


def build_imports(subject_name: str) -> str:
    """Build the fixed import block."""
    return "\n".join(
        [
            "import { describe, it, expect, beforeEach, vi, afterEach } from 'vitest'",
            f"import {{ render, screen, waitFor }} from '{RENDER_HELPER_MODULE}'",
            f"import {subject_name} from './{subject_name}{COMPONENT_FILE_SUFFIX}'",
        ]
    )


def build_body(subject_name: str, sections: list[str]) -> str:
    """Wrap the sections in the outer describe() with mock hooks."""
    return "\n".join(
        [
            f"describe('{subject_name} Component', () => {{",
            "  beforeEach(() => {",
            "    vi.clearAllMocks();",
            "  });",
            "",
            "  afterEach(() => {",
            "    vi.restoreAllMocks();",
            "  });",
            "",
            "\n\n".join(sections),
            "});",
        ]
    )
