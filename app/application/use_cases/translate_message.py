"""TranslateMessageUseCase — translate-only task."""

from __future__ import annotations

import logging

from app.application.ports.completion_port import CompletionPort
from app.application.prompts import TRANSLATE_PROMPT, TRANSLATE_SYSTEM
from app.domain.entities.analysis import AnalysisRequest, TranslationResult
from app.domain.policies.language_names import language_name

logger = logging.getLogger(__name__)

DEFAULT_TARGET_LANGUAGE = "en"


async def translate_text(completion: CompletionPort, text: str, target_code: str | None) -> str:
    """Issue one translation sub-call (temperature 0.3, 500 tokens)."""
    target_name = language_name(target_code or DEFAULT_TARGET_LANGUAGE)
    prompt = TRANSLATE_PROMPT.format(language=target_name, text=text)
    return await completion.complete(TRANSLATE_SYSTEM, prompt, 500, 0.3)


class TranslateMessageUseCase:
    """Translates a guest message without classifying it."""

    def __init__(self, completion: CompletionPort):
        self._completion = completion

    async def execute(self, request: AnalysisRequest) -> TranslationResult:
        translated = await translate_text(
            self._completion, request.text, request.target_language
        )
        if not translated:
            logger.warning("Translation to %s returned no text", request.target_language)

        return TranslationResult(
            translated_text=translated,
            is_translated=bool(translated) and request.wants_translation(),
            target_language=request.target_language,
        )
