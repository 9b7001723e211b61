"""YAML/JSON loading and parsing for requirements files."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import RequirementsLoadError, RequirementsSchemaError
from .models import Requirements


def load_yaml(path: str | Path) -> dict:
    """Load a YAML (or JSON) file and return the raw data.

    Args:
        path: Path to the requirements file.

    Returns:
        The parsed data as a dictionary.

    Raises:
        RequirementsLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise RequirementsLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise RequirementsLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RequirementsLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise RequirementsLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise RequirementsLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def load_requirements(path: str | Path) -> Requirements:
    """Load and parse a requirements file.

    JSON is a subset of YAML, so issue-parser output can be passed directly.

    Raises:
        RequirementsLoadError: If the file cannot be read or parsed.
        RequirementsSchemaError: If the data fails validation.
    """
    data = load_yaml(path)
    return _parse_requirements_data(data)


def parse_requirements_from_string(text: str) -> Requirements:
    """Parse a YAML or JSON string into Requirements.

    Raises:
        RequirementsLoadError: If the text cannot be parsed.
        RequirementsSchemaError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RequirementsLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise RequirementsLoadError(f"Expected YAML mapping at root, got {type(data).__name__}")

    return _parse_requirements_data(data)


def _parse_requirements_data(data: dict) -> Requirements:
    try:
        return Requirements.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise RequirementsSchemaError(
            f"Requirements validation failed with {len(errors)} error(s)", errors
        ) from e
