"""Remote test generation through an OpenAI-compatible chat completions API."""

import logging
import os
from dataclasses import dataclass
from enum import Enum

import httpx

from ..generator.models import CaseContext
from .errors import APIError, ResponseParseError
from .extraction import extract_test_code
from .prompts import SYSTEM_PROMPT, build_generation_prompt

logger = logging.getLogger(__name__)

# Checked in order; the first non-empty value wins
API_KEY_ENV_VARS = ("OPENAI_API_KEY", "GITHUB_TOKEN")

DEFAULT_MODEL = "gpt-4o-mini"


class Provider(Enum):
    """Backend family, selected from the credential prefix."""

    GITHUB_MODELS = "github"
    OPENAI = "openai"

    @property
    def endpoint(self) -> str:
        return PROVIDER_ENDPOINTS[self]

    @property
    def label(self) -> str:
        return PROVIDER_LABELS[self]


PROVIDER_ENDPOINTS = {
    Provider.GITHUB_MODELS: "https://models.inference.ai.azure.com/chat/completions",
    Provider.OPENAI: "https://api.openai.com/v1/chat/completions",
}

PROVIDER_LABELS = {
    Provider.GITHUB_MODELS: "GitHub Models",
    Provider.OPENAI: "OpenAI",
}

GITHUB_TOKEN_PREFIXES = ("ghp_", "ghs_")
OPENAI_KEY_PREFIXES = ("sk-",)


@dataclass(frozen=True)
class RemoteSettings:
    """Request parameters for the completion backend."""

    model: str = DEFAULT_MODEL
    max_tokens: int = 500
    temperature: float = 0.3
    timeout: float = 30.0


@dataclass(frozen=True)
class RemoteConfigStatus:
    """Whether remote generation can run, and against which backend."""

    configured: bool
    message: str
    provider: Provider | None = None


def resolve_api_key(api_key: str | None = None) -> str | None:
    """Return the explicit key, or the first key found in the environment."""
    if api_key:
        return api_key
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


def detect_provider(api_key: str) -> Provider:
    """Map a credential to its backend; unknown prefixes use OpenAI."""
    if api_key.startswith(GITHUB_TOKEN_PREFIXES):
        return Provider.GITHUB_MODELS
    return Provider.OPENAI


def check_remote_config(api_key: str | None = None) -> RemoteConfigStatus:
    """Report whether a credential is available and which backend it selects."""
    key = resolve_api_key(api_key)
    if not key:
        return RemoteConfigStatus(
            configured=False,
            message="No API key found. Set OPENAI_API_KEY or GITHUB_TOKEN environment variable.",
        )

    provider = detect_provider(key)
    if provider == Provider.OPENAI and not key.startswith(OPENAI_KEY_PREFIXES):
        return RemoteConfigStatus(
            configured=True,
            message="Unrecognized API key format, assuming an OpenAI-compatible endpoint",
            provider=provider,
        )
    return RemoteConfigStatus(
        configured=True,
        message=f"{provider.label} API configured",
        provider=provider,
    )


class RemoteGenerator:
    """Generates test bodies with a remote model.

    ``generate`` never raises: every failure is logged and reported as None
    so callers can fall back to a local scaffold.
    """

    def __init__(
        self,
        api_key: str | None = None,
        settings: RemoteSettings | None = None,
        client: httpx.Client | None = None,
    ):
        """Initialize the generator.

        Args:
            api_key: Backend credential. If not provided, uses OPENAI_API_KEY
                or GITHUB_TOKEN from the environment.
            settings: Model and request parameters.
            client: HTTP client to use instead of a private one.
        """
        self.api_key = resolve_api_key(api_key)
        self.settings = settings or RemoteSettings()
        self._client = client
        self._owns_client = client is None

    @property
    def available(self) -> bool:
        """True when a credential was found."""
        return bool(self.api_key)

    @property
    def provider(self) -> Provider | None:
        return detect_provider(self.api_key) if self.api_key else None

    @property
    def client(self) -> httpx.Client:
        """Lazy-load the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.timeout)
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this generator created it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RemoteGenerator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def generate(self, ctx: CaseContext) -> str | None:
        """Generate a test body for one case.

        Args:
            ctx: The case to generate.

        Returns:
            The extracted test body, or None if no credential is configured
            or the call fails in any way.
        """
        if not self.api_key:
            logger.warning("No API key found, falling back to scaffold generation")
            return None

        try:
            prompt = build_generation_prompt(ctx)
            content = self.complete(prompt)
            code = extract_test_code(content)
            if not code:
                raise ResponseParseError("Response contained no test code", raw_response=content)
            return code
        except APIError as e:
            logger.warning(
                "Remote generation failed for %r (status %s): %s",
                ctx.description,
                e.status_code,
                e,
            )
        except Exception as e:
            logger.warning("Remote generation failed for %r: %s", ctx.description, e)
        return None

    def complete(self, prompt: str) -> str:
        """Send one chat completion request and return the message text.

        Raises:
            APIError: If the backend answers with a non-success status.
            ResponseParseError: If the response envelope is malformed.
            httpx.HTTPError: On transport failures.
        """
        provider = detect_provider(self.api_key)
        payload = {
            "model": self.settings.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": self.settings.max_tokens,
            "temperature": self.settings.temperature,
        }

        logger.debug("Requesting completion from %s (%s)", provider.label, self.settings.model)
        response = self.client.post(
            provider.endpoint,
            json=payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
        )

        if not response.is_success:
            raise APIError(
                f"{provider.label} API error: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        return _message_content(response.json())


def _message_content(data: dict) -> str:
    """Pull ``choices[0].message.content`` out of a response envelope."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ResponseParseError(f"Unexpected response shape: {e}", raw_response=str(data)) from e

    if not isinstance(content, str):
        raise ResponseParseError("Message content is not text", raw_response=str(data))
    return content


def generate_remote(
    ctx: CaseContext,
    api_key: str | None = None,
    settings: RemoteSettings | None = None,
) -> str | None:
    """Convenience function to generate one test body remotely.

    Returns:
        The test body, or None on any failure.
    """
    with RemoteGenerator(api_key=api_key, settings=settings) as generator:
        return generator.generate(ctx)
