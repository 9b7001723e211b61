"""Remote test generation through a chat completions backend."""

from .errors import APIError, RemoteGenerationError, ResponseParseError
from .extraction import extract_test_code, strip_code_fences, unwrap_declaration
from .generator import (
    API_KEY_ENV_VARS,
    DEFAULT_MODEL,
    Provider,
    RemoteConfigStatus,
    RemoteGenerator,
    RemoteSettings,
    check_remote_config,
    detect_provider,
    generate_remote,
    resolve_api_key,
)
from .prompts import SYSTEM_PROMPT, build_generation_prompt

__all__ = [
    # Generator
    "RemoteGenerator",
    "RemoteSettings",
    "RemoteConfigStatus",
    "Provider",
    "generate_remote",
    "check_remote_config",
    "detect_provider",
    "resolve_api_key",
    "API_KEY_ENV_VARS",
    "DEFAULT_MODEL",
    # Errors
    "RemoteGenerationError",
    "APIError",
    "ResponseParseError",
    # Prompts
    "SYSTEM_PROMPT",
    "build_generation_prompt",
    # Extraction
    "extract_test_code",
    "strip_code_fences",
    "unwrap_declaration",
]
