import logging
from typing import Any, Protocol

import openai
from openai import AsyncOpenAI

from app.agent.errors import TransportError, UpstreamError
from app.core.config import settings

logger = logging.getLogger(__name__)


class TextCompletionClient(Protocol):
    async def complete(self, prompt: str, *, model: str, temperature: float) -> list[str]:
        """Return the ordered choice texts for `prompt`."""
        ...


def _error_body(exc: openai.APIStatusError) -> Any:
    # The SDK strips the envelope from `exc.body`; forward what the provider sent.
    try:
        return exc.response.json()
    except ValueError:
        return exc.body if exc.body is not None else exc.response.text


class CompletionClient:
    """Legacy text completions through the OpenAI SDK."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
    ):
        self.client = AsyncOpenAI(
            api_key=api_key or settings.OPENAI_API_KEY,
            base_url=base_url or settings.OPENAI_BASE_URL,
            max_retries=0,
        )

    async def complete(self, prompt: str, *, model: str, temperature: float) -> list[str]:
        """
        Issue a single completion request and return the text of every choice.

        Raises `UpstreamError` when the provider answers with an error status and
        `TransportError` for anything else that prevents a usable response.
        """
        logger.info("Issuing completion request to model %s...", model)
        try:
            response = await self.client.completions.create(
                model=model,
                prompt=prompt,
                temperature=temperature,
            )
        except openai.APIStatusError as e:
            raise UpstreamError(e.status_code, _error_body(e)) from e
        except openai.OpenAIError as e:
            raise TransportError(str(e)) from e

        if not getattr(response, "choices", None):
            raise TransportError(f"Provider {model} returned no choices")

        logger.info("Received %s choice(s) from %s.", len(response.choices), model)
        return [choice.text for choice in response.choices]
