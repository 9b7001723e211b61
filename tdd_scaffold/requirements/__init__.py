"""Requirements layer: feature request models and file loading."""

from .errors import (
    InvalidComponentNameError,
    InvalidRequirementsError,
    RequirementsLoadError,
    RequirementsSchemaError,
)
from .loader import load_requirements, load_yaml, parse_requirements_from_string
from .models import GenerationOptions, IssueRef, Requirements

__all__ = [
    "InvalidComponentNameError",
    "InvalidRequirementsError",
    "RequirementsLoadError",
    "RequirementsSchemaError",
    "GenerationOptions",
    "IssueRef",
    "Requirements",
    "load_requirements",
    "load_yaml",
    "parse_requirements_from_string",
]
