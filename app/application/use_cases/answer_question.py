"""AnswerQuestionUseCase — context-grounded answers to guest questions."""

from __future__ import annotations

import logging

from app.application.ports.completion_port import CompletionPort
from app.application.ports.qa_repo import QARepository
from app.application.prompts import QA_PROMPT, QA_SYSTEM
from app.domain.entities.analysis import AnalysisRequest, AnswerResult, QAPair
from app.domain.errors import BadRequest

logger = logging.getLogger(__name__)


def format_qa_context(pairs: list[QAPair]) -> str:
    return "\n\n".join(f"Q: {p.question}\nA: {p.answer}" for p in pairs)


class AnswerQuestionUseCase:
    """Answers a question using only the supplied or stored Q&A context."""

    def __init__(self, completion: CompletionPort, qa_repo: QARepository):
        self._completion = completion
        self._qa = qa_repo

    async def execute(self, request: AnalysisRequest) -> AnswerResult:
        context = await self._assemble_context(request)
        if not context.strip():
            raise BadRequest("No Q&A context available (provide subjectId or context)")

        prompt = QA_PROMPT.format(context=context, question=request.text)
        answer = await self._completion.complete(QA_SYSTEM, prompt, 500, 0.7)
        return AnswerResult(answer=answer)

    async def _assemble_context(self, request: AnalysisRequest) -> str:
        """Stored pairs for the subject win; inline context is the fallback.

        StoreError from the lookup propagates to the caller.
        """
        if request.subject_id:
            pairs = await self._qa.list_active(request.subject_id)
            logger.info("Loaded %d Q&A pairs for subject %s", len(pairs), request.subject_id)
            if pairs:
                return format_qa_context(pairs)
        return request.context or ""
