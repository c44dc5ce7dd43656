"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.llm.openai_adapter import OpenAIAdapter
from app.adapters.persistence.database import get_session
from app.adapters.persistence.repositories import (
    SqlGuestMessageRepository,
    SqlQARepository,
)
from app.application.ports.completion_port import CompletionPort
from app.application.use_cases.analyze_message import AnalyzeMessageUseCase
from app.config import settings

# Stateless adapter; holds only the configured HTTP client
_completion_adapter = OpenAIAdapter(settings)


def get_completion() -> CompletionPort:
    return _completion_adapter


def get_analyze_message_uc(
    session: AsyncSession = Depends(get_session),
    completion: CompletionPort = Depends(get_completion),
) -> AnalyzeMessageUseCase:
    return AnalyzeMessageUseCase(
        completion=completion,
        qa_repo=SqlQARepository(session),
        message_repo=SqlGuestMessageRepository(session),
    )
