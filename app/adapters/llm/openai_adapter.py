"""OpenAI adapter — implements CompletionPort using the OpenAI API."""

from __future__ import annotations

import logging

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from app.application.ports.completion_port import CompletionPort
from app.config import Settings
from app.domain.errors import UpstreamError

logger = logging.getLogger(__name__)


class OpenAIAdapter(CompletionPort):
    """OpenAI implementation of CompletionPort.

    One request per call, no retries: a failed sub-call fails the caller.
    The configured timeout is the per-call deadline.
    """

    def __init__(self, settings: Settings, client: AsyncOpenAI | None = None):
        self._api_key = (settings.openai_api_key or "").strip()
        self._model = settings.openai_model
        self._client = client
        if self._client is None and self._api_key:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=settings.openai_base_url,
                timeout=settings.completion_timeout_seconds,
                max_retries=0,
            )

    def is_configured(self) -> bool:
        return bool(self._api_key) and self._client is not None

    async def complete(
        self,
        system_instruction: str,
        user_prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        if self._client is None:
            raise UpstreamError(None, "OpenAI client is not configured")

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": user_prompt},
                ],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except APIStatusError as e:
            body = e.response.text if e.response is not None else str(e)
            logger.error("OpenAI API error: %s - %s", e.status_code, body)
            raise UpstreamError(e.status_code, body) from e
        except APIConnectionError as e:
            logger.error("OpenAI API unreachable: %s", e)
            raise UpstreamError(None, str(e)) from e

        if not response.choices:
            return ""
        content = response.choices[0].message.content
        return (content or "").strip()
