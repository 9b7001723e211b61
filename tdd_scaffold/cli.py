"""Command-line interface for tdd-scaffold."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .constants import COMPONENT_FILE_SUFFIX, TEST_FILE_SUFFIX
from .output.formatter import format_validation_result
from .requirements.errors import (
    InvalidComponentNameError,
    InvalidRequirementsError,
    RequirementsLoadError,
    RequirementsSchemaError,
)
from .requirements.models import GenerationOptions, IssueRef, Requirements
from .validators.base import FullValidationResult


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """tdd-scaffold: red-phase test scaffolds for Vue components."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_remote(use_remote: bool, api_key: str | None, model: str | None):
    """Create a remote generator only when remote generation is requested."""
    if not use_remote:
        return None

    from .remote.generator import RemoteGenerator, RemoteSettings, check_remote_config

    status = check_remote_config(api_key)
    if status.configured:
        click.echo(f"Remote test generation enabled ({status.message})", err=True)
    else:
        click.echo(f"Remote generation requested but {status.message}", err=True)
        click.echo("Falling back to local scaffolds", err=True)

    settings = RemoteSettings(model=model) if model else RemoteSettings()
    return RemoteGenerator(api_key=api_key, settings=settings)


def _generate(
    component_name: str,
    requirements: Requirements,
    options: GenerationOptions,
    remote,
) -> str:
    """Assemble a test file, exiting with code 2 on invalid input."""
    from .generator.assembler import assemble

    try:
        return assemble(component_name, requirements, options, remote=remote)
    except InvalidComponentNameError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except InvalidRequirementsError as e:
        click.echo("Invalid requirements:", err=True)
        for err in e.errors:
            click.echo(f"  - {err}", err=True)
        sys.exit(2)
    finally:
        if remote is not None:
            remote.close()


def _report(result: FullValidationResult) -> None:
    """Print validation errors and warnings to stderr."""
    if result.errors:
        click.echo("Generated test content has errors:", err=True)
        for err in result.errors:
            click.echo(f"  - {err}", err=True)
    if result.warnings:
        click.echo("Generated test content has warnings:", err=True)
        for warning in result.warnings:
            click.echo(f"  - {warning}", err=True)


def _write_files(
    output_dir: str,
    component_name: str,
    test_content: str,
    force: bool,
) -> list[Path]:
    """Write the test file first, then the component stub."""
    from .generator.stub import render_component_stub

    out_path = Path(output_dir)
    out_path.mkdir(parents=True, exist_ok=True)

    files = [
        (out_path / f"{component_name}{TEST_FILE_SUFFIX}", test_content),
        (out_path / f"{component_name}{COMPONENT_FILE_SUFFIX}", render_component_stub(component_name)),
    ]

    if not force:
        for file_path, _ in files:
            if file_path.exists():
                click.echo(f"File already exists: {file_path} (use --force to overwrite)", err=True)
                sys.exit(2)

    for file_path, content in files:
        file_path.write_text(content, encoding="utf-8")
        click.echo(f"Generated: {file_path}")

    return [path for path, _ in files]


@main.command()
@click.argument("component_name")
@click.argument("requirements_file", type=click.Path(exists=True))
@click.option("--issue-number", type=int, default=None, help="Tracker issue number")
@click.option("--issue-title", default=None, help="Tracker issue title")
@click.option(
    "--remote/--no-remote",
    "use_remote",
    default=False,
    envvar="TDD_REMOTE_GENERATE",
    help="Generate test bodies with a remote model, falling back to scaffolds",
)
@click.option(
    "--assistant/--no-assistant",
    "assistant_mode",
    default=False,
    envvar="TDD_ASSISTANT_MODE",
    help="Use richly annotated scaffolds for completion assistants",
)
@click.option(
    "--api-key",
    default=None,
    help="Remote API key (defaults to OPENAI_API_KEY, then GITHUB_TOKEN)",
)
@click.option("--model", default=None, help="Remote model name")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "files"]),
    default="text",
    help="Output format: 'text' prints to stdout, 'files' writes to output-dir",
)
@click.option(
    "--output-dir",
    default="./src/components/",
    help="Output directory for generated files",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite existing files")
@click.option("--strict", is_flag=True, default=False, help="Treat warnings as errors")
def generate(
    component_name: str,
    requirements_file: str,
    issue_number: int | None,
    issue_title: str | None,
    use_remote: bool,
    assistant_mode: bool,
    api_key: str | None,
    model: str | None,
    output_format: str,
    output_dir: str,
    force: bool,
    strict: bool,
):
    """Generate a component test file from a requirements file.

    COMPONENT_NAME is the PascalCase component name.
    REQUIREMENTS_FILE is a YAML or JSON requirements file.

    Exit codes:
      0 - Success
      1 - Generated content failed validation
      2 - File, schema, requirements or name error
    """
    from .requirements.loader import load_requirements
    from .validators.content import full_validate

    if (issue_number is None) != (issue_title is None):
        raise click.UsageError("--issue-number and --issue-title must be given together")

    try:
        requirements = load_requirements(requirements_file)
    except RequirementsLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except RequirementsSchemaError as e:
        click.echo(f"Requirements validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)

    issue = None
    if issue_number is not None:
        issue = IssueRef(number=issue_number, title=issue_title)

    options = GenerationOptions(issue=issue, use_remote=use_remote, assistant_mode=assistant_mode)
    remote = _build_remote(use_remote, api_key, model)
    content = _generate(component_name, requirements, options, remote)

    result = full_validate(content, component_name)
    _report(result)
    if result.has_errors or (strict and result.has_warnings):
        sys.exit(1)

    if output_format == "text":
        click.echo(content, nl=False)
    else:
        _write_files(output_dir, component_name, content, force)

    click.echo(
        f"Accessibility tests: {result.summary.has_accessibility_tests}, "
        f"red phase: {result.summary.follows_red_phase}",
        err=True,
    )
    sys.exit(0)


@main.command()
@click.argument("test_file", type=click.Path(exists=True))
@click.argument("component_name")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(test_file: str, component_name: str, output_format: str, strict: bool):
    """Validate a generated test file.

    TEST_FILE is the path to the test source. COMPONENT_NAME is the
    component it tests.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File error
    """
    from .validators.content import full_validate

    try:
        text = Path(test_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error reading file: {e}", err=True)
        sys.exit(2)

    result = full_validate(text, component_name)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if not result.valid:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.option(
    "--output-dir",
    default="./src/components/",
    help="Directory for the generated test and component files",
)
@click.option(
    "--issue-dir",
    default=".",
    help="Directory for the saved issue Markdown file",
)
@click.option(
    "--generate/--no-generate",
    "generate_files",
    default=True,
    help="Generate the test and component files after collecting answers",
)
@click.option("--remote/--no-remote", "use_remote", default=False, envvar="TDD_REMOTE_GENERATE")
@click.option("--assistant/--no-assistant", "assistant_mode", default=False, envvar="TDD_ASSISTANT_MODE")
@click.option("--force", is_flag=True, default=False, help="Overwrite existing files")
def feature(
    output_dir: str,
    issue_dir: str,
    generate_files: bool,
    use_remote: bool,
    assistant_mode: bool,
    force: bool,
):
    """Interactive feature wizard.

    Collects a user story and test scenarios, saves an issue body as
    Markdown and optionally generates the test and component files.
    """
    from .feature.collector import collect_requirements
    from .feature.issue import render_issue_document
    from .generator.naming import is_valid_component_name

    click.echo("Feature wizard (blank answer ends a list)\n")

    def ask(question: str) -> str:
        return click.prompt(question, default="", show_default=False)

    request = collect_requirements(ask)

    if not is_valid_component_name(request.component_name):
        click.echo(f"Error: {InvalidComponentNameError(request.component_name)}", err=True)
        sys.exit(2)

    issue_path = Path(issue_dir) / f"issue-{request.component_name}.md"
    issue_path.parent.mkdir(parents=True, exist_ok=True)
    issue_path.write_text(render_issue_document(request), encoding="utf-8")
    click.echo(f"Issue content saved to: {issue_path}")

    if generate_files:
        options = GenerationOptions(use_remote=use_remote, assistant_mode=assistant_mode)
        remote = _build_remote(use_remote, None, None)
        content = _generate(request.component_name, request.requirements, options, remote)
        _write_files(output_dir, request.component_name, content, force)

    sys.exit(0)


if __name__ == "__main__":
    main()
