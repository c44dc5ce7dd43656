"""ClassifyMessageUseCase — the full pipeline.

Sentiment, urgency and topic are always requested; translation only when
the caller names two different languages. All issued sub-calls run
concurrently and succeed or fail as a unit. The only local recovery is the
topic JSON parse, which falls back to ``other``.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from collections.abc import Awaitable

from app.application.ports.completion_port import CompletionPort
from app.application.prompts import (
    SENTIMENT_PROMPT,
    SENTIMENT_SYSTEM,
    TOPIC_SYSTEM,
    URGENCY_PROMPT,
    URGENCY_SYSTEM,
    build_topic_prompt,
)
from app.application.use_cases.translate_message import translate_text
from app.domain.entities.analysis import (
    AnalysisRequest,
    AnalysisResult,
    TopicClassification,
    TopicFallback,
    TopicParse,
    TopicParsed,
    TranslationResult,
)
from app.domain.policies.department import normalize_department
from app.domain.value_objects.enums import Department, Sentiment, Urgency

logger = logging.getLogger(__name__)

CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)

SENTIMENT_LABELS = frozenset(s.value for s in Sentiment)
URGENCY_LABELS = frozenset(u.value for u in Urgency)


def parse_topic(raw_text: str) -> TopicParse:
    """Parse the topic completion into a normalized TopicClassification.

    Any shape other than a JSON object yields TopicFallback. The topic is
    normalized on both paths, so a well-formed object with an unknown topic
    still lands on ``other``.
    """
    cleaned = CODE_FENCE_RE.sub("", (raw_text or "").strip())
    try:
        parsed = json.loads(cleaned)
    except (json.JSONDecodeError, TypeError):
        parsed = None

    if not isinstance(parsed, dict):
        return TopicFallback(
            classification=TopicClassification(topic=Department.OTHER, subtopic=None),
            raw_text=raw_text,
        )

    subtopic = parsed.get("subtopic")
    return TopicParsed(
        classification=TopicClassification(
            topic=normalize_department(parsed.get("topic")),
            subtopic=str(subtopic) if subtopic else None,
        )
    )


async def run_all(jobs: list[Awaitable[str]]) -> list[str]:
    """Run every job concurrently; on the first failure cancel the rest and re-raise."""
    tasks = [asyncio.ensure_future(job) for job in jobs]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


class ClassifyMessageUseCase:
    """Orchestrates the four classification/translation sub-calls."""

    def __init__(self, completion: CompletionPort):
        self._completion = completion

    async def execute(self, request: AnalysisRequest) -> AnalysisResult:
        text = request.text
        jobs: list[Awaitable[str]] = [
            self._completion.complete(
                SENTIMENT_SYSTEM, SENTIMENT_PROMPT.format(text=text), 50, 0.1
            ),
            self._completion.complete(
                URGENCY_SYSTEM, URGENCY_PROMPT.format(text=text), 50, 0.1
            ),
            self._completion.complete(TOPIC_SYSTEM, build_topic_prompt(text), 100, 0),
        ]
        wants_translation = request.wants_translation()
        if wants_translation:
            jobs.append(translate_text(self._completion, text, request.target_language))

        completions = await run_all(jobs)
        sentiment, urgency, topic_raw = completions[:3]

        topic = parse_topic(topic_raw)
        if isinstance(topic, TopicFallback):
            logger.warning("Failed to parse topics JSON, using 'other': %r", topic.raw_text)

        if sentiment not in SENTIMENT_LABELS:
            logger.warning("Sentiment label outside closed set: %r", sentiment)
        if urgency not in URGENCY_LABELS:
            logger.warning("Urgency label outside closed set: %r", urgency)

        translation = TranslationResult.skipped()
        if wants_translation:
            translated = completions[3]
            if translated:
                translation = TranslationResult(
                    translated_text=translated,
                    is_translated=True,
                    target_language=request.target_language,
                )
            else:
                logger.warning("Translation to %s returned no text", request.target_language)

        result = AnalysisResult(
            sentiment=sentiment,
            urgency=urgency,
            topic=topic.classification,
            translation=translation,
        )
        logger.info(
            "Classified message: sentiment=%s, urgency=%s, topic=%s/%s, translated=%s",
            result.sentiment, result.urgency, result.topic.topic.value,
            result.topic.subtopic, translation.is_translated,
        )
        return result
