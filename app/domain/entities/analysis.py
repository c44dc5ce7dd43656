"""Analysis entities — the request and every result shape the pipeline produces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.domain.value_objects.enums import Department, TaskType


@dataclass(frozen=True)
class AnalysisRequest:
    """One guest-message analysis request, built once per invocation."""

    task: TaskType
    text: str
    target_language: str | None = None
    original_language: str | None = None
    message_id: str | None = None
    context: str | None = None
    subject_id: str | None = None

    def wants_translation(self) -> bool:
        """True when both languages are given and differ (case-insensitively)."""
        return bool(
            self.original_language
            and self.target_language
            and self.original_language.lower() != self.target_language.lower()
        )


@dataclass(frozen=True)
class TopicClassification:
    topic: Department
    subtopic: str | None = None


@dataclass(frozen=True)
class TopicParsed:
    """The topic completion was valid JSON."""

    classification: TopicClassification


@dataclass(frozen=True)
class TopicFallback:
    """The topic completion could not be parsed; a default was substituted."""

    classification: TopicClassification
    raw_text: str


TopicParse = TopicParsed | TopicFallback


@dataclass(frozen=True)
class TranslationResult:
    translated_text: str | None
    is_translated: bool
    target_language: str | None

    @classmethod
    def skipped(cls) -> TranslationResult:
        return cls(translated_text=None, is_translated=False, target_language=None)

    def as_fields(self) -> dict[str, Any]:
        return {
            "translated_text": self.translated_text,
            "is_translated": self.is_translated,
            "target_language": self.target_language,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Flat result of the full pipeline."""

    sentiment: str
    urgency: str
    topic: TopicClassification
    translation: TranslationResult

    def as_fields(self) -> dict[str, Any]:
        return {
            "sentiment": self.sentiment,
            "urgency": self.urgency,
            "topic": self.topic.topic.value,
            "subtopic": self.topic.subtopic,
            **self.translation.as_fields(),
        }


@dataclass(frozen=True)
class AnswerResult:
    answer: str

    def as_fields(self) -> dict[str, Any]:
        return {"answer": self.answer}


@dataclass(frozen=True)
class QAPair:
    question: str
    answer: str


@dataclass(frozen=True)
class PersistenceOutcome:
    """What happened when the result was written back.

    detail is the number of rows updated on success, otherwise a short
    explanation or the store's error message.
    """

    attempted: bool
    ok: bool
    detail: int | str
