"""Claude API wrapper used by every AI operation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anthropic

from jobboard_ai.errors import upstream_error_for
from jobboard_ai.operations import GenerationSettings, Operation

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"

# Prefilled assistant turn that forces a JSON object reply.
JSON_PREFILL = "{"


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str | None
    model: str
    input_tokens: int
    output_tokens: int


class LLMClient:
    """Async Claude API client.

    One instance is built at startup and shared by all requests. The SDK's
    own retry loop is disabled: a failed call surfaces immediately.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        model: str = DEFAULT_MODEL,
        default_max_tokens: int = 4096,
    ):
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self.model = model
        self.default_max_tokens = default_max_tokens

    async def generate(
        self,
        prompt: str,
        settings: GenerationSettings,
        operation: Operation,
        system: str = "",
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage.

        Raises the operation's ``UpstreamGenerationError`` subclass on any
        failure; the original exception is logged and chained, never exposed.
        """
        messages = [{"role": "user", "content": prompt}]
        if settings.json_mode:
            messages.append({"role": "assistant", "content": JSON_PREFILL})
        kwargs: dict = {
            "model": self.model,
            "max_tokens": settings.max_tokens or self.default_max_tokens,
            "temperature": settings.temperature,
            "messages": messages,
        }
        if system:
            kwargs["system"] = system

        logger.debug("LLM call: operation=%s model=%s", operation.value, self.model)
        try:
            message = await self.client.messages.create(**kwargs)
        except Exception as exc:
            logger.error("LLM call failed for %s", operation.value, exc_info=True)
            raise upstream_error_for(operation)(str(exc)) from exc

        text = _first_text(message)
        if text is not None and settings.json_mode:
            text = JSON_PREFILL + text
        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        return LLMResponse(
            text=text,
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )


def _first_text(message) -> str | None:
    for block in message.content or []:
        text = getattr(block, "text", None)
        if text is not None:
            return text
    return None
