from __future__ import annotations

import logging

from openai import AsyncOpenAI, OpenAIError

from cineai.clients.base import TransportError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TIMEOUT = 20.0


class OpenAICompletionClient:
    """Completion client backed by the OpenAI chat completions API."""

    name = "openai"

    def __init__(
        self,
        *,
        api_key: str,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        client: AsyncOpenAI | None = None,
        debug: bool = False,
    ) -> None:
        if not api_key:
            raise TransportError("OPENAI_API_KEY is required for the OpenAI completion client")

        self._client = client or AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self._model = model or DEFAULT_MODEL
        self._debug = debug

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        if self._debug:
            logger.info(
                f"[DEBUG] Requesting completion from OpenAI ({self._model}), "
                f"max_tokens={max_tokens}, temperature={temperature}"
            )

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except OpenAIError as exc:
            raise TransportError(f"OpenAI request failed: {exc}") from exc

        choices = getattr(response, "choices", None)
        if not choices:
            raise TransportError("OpenAI response did not include any choices")

        content = choices[0].message.content
        if not content:
            raise TransportError("OpenAI response did not include message content")

        if self._debug:
            logger.info(f"[DEBUG] OpenAI returned {len(content)} characters")

        return content

    async def close(self) -> None:
        await self._client.close()


__all__ = ["OpenAICompletionClient"]
