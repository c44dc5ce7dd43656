"""Analysis endpoint — classify, translate or answer a guest message."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.application.use_cases.analyze_message import AnalyzeMessageUseCase
from app.infrastructure.api.dependencies import get_analyze_message_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])

# ── Request / Response schemas ──────────────────────────────────────


class AnalyzeRequest(BaseModel):
    """Raw request body. task/text are optional here so that their absence
    is reported as a 400 by the use case rather than a schema error."""

    task: str | None = None
    text: str | None = None
    target_language: str | None = Field(
        default=None, validation_alias=AliasChoices("targetLanguage", "target_language")
    )
    original_language: str | None = Field(
        default=None, validation_alias=AliasChoices("originalLanguage", "original_language")
    )
    message_id: str | None = Field(
        default=None, validation_alias=AliasChoices("messageId", "message_id")
    )
    context: str | None = None
    subject_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("subjectId", "subject_id", "hotelId", "hotel_id"),
    )

    @field_validator("message_id", "subject_id", mode="before")
    @classmethod
    def _opaque_id(cls, value: Any) -> Any:
        # Ids are opaque; numeric ids from callers are kept as strings
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class PersistenceOutcomeSchema(BaseModel):
    attempted: bool
    ok: bool
    detail: int | str


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    task: str
    result: str | None
    results: dict[str, Any]
    db_update: PersistenceOutcomeSchema


# ── Route ───────────────────────────────────────────────────────────


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_message(
    body: AnalyzeRequest,
    uc: AnalyzeMessageUseCase = Depends(get_analyze_message_uc),
):
    """Run one analysis task and write the outcome back to the message."""
    request = uc.build_request(
        task=body.task,
        text=body.text,
        target_language=body.target_language,
        original_language=body.original_language,
        message_id=body.message_id,
        context=body.context,
        subject_id=body.subject_id,
    )
    response = await uc.execute(request)

    logger.info(
        "Task %s done: has_result=%s, db_update.ok=%s",
        response.task.value, response.result is not None, response.db_update.ok,
    )

    return AnalyzeResponse(
        task=response.task.value,
        result=response.result,
        results={to_camel(k): v for k, v in response.results.as_fields().items()},
        db_update=PersistenceOutcomeSchema(**asdict(response.db_update)),
    )
