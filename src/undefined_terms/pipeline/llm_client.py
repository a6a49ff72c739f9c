"""
LLM client for Ollama Cloud API.

Handles communication with Ollama Cloud: turns a prompt string into a raw
text completion and maps provider failures onto ProviderError.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx
from ollama import Client, RequestError, ResponseError

from undefined_terms.core.config import DEFAULT_OLLAMA_HOST, DEFAULT_OLLAMA_MODEL, Settings
from undefined_terms.core.errors import ConfigError, ProviderError, ProviderErrorKind
from undefined_terms.pipeline.schemas import CompletionOptions

logger = logging.getLogger(__name__)

AUTH_STATUS_CODES = (401, 403)
RATE_LIMIT_STATUS_CODE = 429


class CompletionClient(Protocol):
    """Anything that turns a prompt into a raw completion."""

    def complete(self, prompt_text: str, options: CompletionOptions) -> str:
        """Return the completion text; raise ProviderError on failure."""
        ...


def provider_error_from(exc: Exception) -> ProviderError:
    """Map an exception from the ollama/httpx stack onto ProviderError."""
    if isinstance(exc, ResponseError):
        status = exc.status_code
        if status in AUTH_STATUS_CODES:
            kind = ProviderErrorKind.AUTH
        elif status == RATE_LIMIT_STATUS_CODE:
            kind = ProviderErrorKind.RATE_LIMITED
        else:
            kind = ProviderErrorKind.OTHER
        return ProviderError(kind, str(exc.error), status_code=status)
    if isinstance(exc, (ConnectionError, httpx.TransportError)):
        return ProviderError(ProviderErrorKind.NETWORK, str(exc) or type(exc).__name__)
    return ProviderError(ProviderErrorKind.OTHER, str(exc) or type(exc).__name__)


def _message_content(response: Any) -> str:
    """Pull the message text out of a chat response (mapping or object)."""
    message = None
    if isinstance(response, dict):
        message = response.get("message")
    elif hasattr(response, "message"):
        message = response.message

    if isinstance(message, dict):
        content = message.get("content")
    elif isinstance(message, str):
        content = message
    else:
        content = getattr(message, "content", None)
    return content or ""


class OllamaLLMClient:
    """
    Client for interacting with Ollama Cloud API.

    Handles:
    - Single-shot, non-streaming chat completions
    - Mapping of network/auth/rate-limit failures onto ProviderError
    """

    def __init__(
        self,
        api_key: Optional[str],
        host: str = DEFAULT_OLLAMA_HOST,
        model: str = DEFAULT_OLLAMA_MODEL,
    ):
        """
        Initialize Ollama LLM client.

        Args:
            api_key: Ollama API key
            host: Ollama API host (defaults to https://ollama.com)
            model: Default model name, used when a call does not name one
        """
        if not api_key:
            raise ConfigError("OLLAMA_API_KEY not provided")

        self.api_key = api_key
        self.host = host
        self.model = model

        self.client = Client(
            host=host,
            headers={'Authorization': f'Bearer {self.api_key}'}
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "OllamaLLMClient":
        return cls(api_key=settings.api_key, host=settings.host, model=settings.model)

    def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.0,
        model: Optional[str] = None,
    ) -> Any:
        """
        Send one chat request to Ollama.

        Raises:
            ProviderError: On network, auth, rate-limit or other API failure
        """
        try:
            return self.client.chat(
                model=model or self.model,
                messages=messages,
                stream=False,
                options={
                    'temperature': temperature,
                }
            )
        except (ResponseError, RequestError, ConnectionError, httpx.TransportError) as e:
            error = provider_error_from(e)
            logger.error(f"Error calling Ollama API: {error.describe()}")
            raise error from e

    def complete(self, prompt_text: str, options: CompletionOptions) -> str:
        """Send the prompt as a single user message and return the reply text."""
        logger.debug(f"LLM call: model={options.model}, prompt length={len(prompt_text)} characters")
        response = self.chat(
            messages=[{'role': 'user', 'content': prompt_text}],
            temperature=options.temperature,
            model=options.model,
        )
        content = _message_content(response)
        if not content.strip():
            logger.warning(f"Empty content in LLM response (type: {type(response).__name__})")
        return content
