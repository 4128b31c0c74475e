"""OpenRouter chat-completion wrapper.

One POST per call, no retries. Failures come back as ProviderFailure values
rather than exceptions so the pipeline can treat them as a designed outcome.
"""

import logging

import httpx

from config import Settings
from models.schemas.prompt_pair import PromptPair
from models.schemas.provider_outcome import ProviderFailure, ProviderOutcome, RawContent
from services.errors import ConfigurationError

logger = logging.getLogger(__name__)

OPENROUTER_API_URL = "https://openrouter.ai/api/v1/chat/completions"


class CompletionClient:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        # tests swap in httpx.MockTransport
        self._transport = transport

    def _build_payload(self, prompt: PromptPair) -> dict:
        return {
            "model": self._settings.openrouter_model,
            "messages": [
                {"role": "system", "content": prompt.system_instruction},
                {"role": "user", "content": prompt.user_instruction},
            ],
            "max_tokens": self._settings.max_output_tokens,
            "response_format": {"type": "json_object"},
        }

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.openrouter_api_key}",
            "Content-Type": "application/json",
        }

    async def complete(self, prompt: PromptPair) -> ProviderOutcome:
        """Send the prompt pair and return the model's message body."""
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.request_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    OPENROUTER_API_URL,
                    json=self._build_payload(prompt),
                    headers=self._headers(),
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Completion provider returned HTTP %s", e.response.status_code)
            return ProviderFailure(kind="provider", detail=f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error("Completion provider request failed: %s", e)
            return ProviderFailure(kind="transport", detail=str(e) or type(e).__name__)

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Malformed completion envelope: %r", e)
            return ProviderFailure(kind="provider", detail="malformed response envelope")

        if not isinstance(content, str):
            logger.error("Completion content is %s, expected a string", type(content).__name__)
            return ProviderFailure(kind="provider", detail="malformed response envelope")

        logger.debug("Completion provider returned %d chars", len(content))
        return RawContent(content=content)


def build_completion_client(settings: Settings) -> CompletionClient:
    """Create the process-wide client; a missing API key is fatal."""
    if not settings.provider_configured:
        raise ConfigurationError("OPENROUTER_API_KEY is not set")
    return CompletionClient(settings)
