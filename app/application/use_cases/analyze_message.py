"""AnalyzeMessageUseCase — validates a request, routes it to one task,
then commits the outcome.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from app.application.ports.completion_port import CompletionPort
from app.application.ports.guest_message_repo import GuestMessageRepository
from app.application.ports.qa_repo import QARepository
from app.application.use_cases.answer_question import AnswerQuestionUseCase
from app.application.use_cases.classify_message import ClassifyMessageUseCase
from app.application.use_cases.commit_analysis import CommitAnalysisUseCase
from app.application.use_cases.translate_message import TranslateMessageUseCase
from app.domain.entities.analysis import (
    AnalysisRequest,
    AnalysisResult,
    AnswerResult,
    PersistenceOutcome,
    TranslationResult,
)
from app.domain.errors import BadRequest, ConfigurationError
from app.domain.value_objects.enums import TaskType

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResponse:
    """Everything the caller gets back for one request."""

    task: TaskType
    result: str | None
    results: AnalysisResult | TranslationResult | AnswerResult
    db_update: PersistenceOutcome


class AnalyzeMessageUseCase:
    """Entry point for a single analysis request."""

    def __init__(
        self,
        completion: CompletionPort,
        qa_repo: QARepository,
        message_repo: GuestMessageRepository,
    ):
        self._completion = completion
        self._classify = ClassifyMessageUseCase(completion)
        self._translate = TranslateMessageUseCase(completion)
        self._answer = AnswerQuestionUseCase(completion, qa_repo)
        self._commit = CommitAnalysisUseCase(message_repo)

    def build_request(
        self,
        task: str | None,
        text: str | None,
        target_language: str | None = None,
        original_language: str | None = None,
        message_id: str | None = None,
        context: str | None = None,
        subject_id: str | None = None,
    ) -> AnalysisRequest:
        """Validate raw input and freeze it into an AnalysisRequest.

        Checks run in order: task/text present, credential configured,
        task recognized.
        """
        if not task or not text:
            raise BadRequest("Missing 'task' or 'text'")

        if not self._completion.is_configured():
            raise ConfigurationError("OpenAI API key not configured")

        try:
            task_type = TaskType(task)
        except ValueError:
            allowed = ", ".join(t.value for t in TaskType)
            raise BadRequest(f"Unsupported task '{task}'", f"expected one of: {allowed}") from None

        return AnalysisRequest(
            task=task_type,
            text=text,
            target_language=target_language,
            original_language=original_language,
            message_id=message_id,
            context=context,
            subject_id=subject_id,
        )

    async def execute(self, request: AnalysisRequest) -> AnalysisResponse:
        logger.info("Running task %s (message_id=%s)", request.task.value, request.message_id)

        if request.task == TaskType.FULL_PIPELINE:
            results = await self._classify.execute(request)
            result = json.dumps(results.as_fields(), ensure_ascii=False)
        elif request.task == TaskType.TRANSLATE:
            results = await self._translate.execute(request)
            result = results.translated_text
        else:
            results = await self._answer.execute(request)
            result = results.answer

        db_update = await self._commit.execute(request.message_id, results.as_fields())

        return AnalysisResponse(
            task=request.task,
            result=result,
            results=results,
            db_update=db_update,
        )
