"""Tests for context-grounded question answering."""

import pytest

from app.application.prompts import QA_SYSTEM
from app.application.use_cases.answer_question import (
    AnswerQuestionUseCase,
    format_qa_context,
)
from app.domain.entities.analysis import AnalysisRequest, QAPair
from app.domain.errors import BadRequest, StoreError
from app.domain.value_objects.enums import TaskType


def _request(**kwargs) -> AnalysisRequest:
    return AnalysisRequest(task=TaskType.ANSWER_QUESTION, text="When is breakfast?", **kwargs)


def test_format_qa_context():
    pairs = [QAPair("Q1?", "A1."), QAPair("Q2?", "A2.")]
    assert format_qa_context(pairs) == "Q: Q1?\nA: A1.\n\nQ: Q2?\nA: A2."


@pytest.mark.asyncio
async def test_inline_context(make_completion, make_qa_repo):
    completion = make_completion()
    qa = make_qa_repo()
    result = await AnswerQuestionUseCase(completion, qa).execute(
        _request(context="Breakfast: 7-10 am.")
    )

    call, = completion.calls
    assert call.system_instruction == QA_SYSTEM
    assert call.temperature == 0.7
    assert call.max_tokens == 500
    assert call.user_prompt == "Context:\nBreakfast: 7-10 am.\n\nQuestion: When is breakfast?\nAnswer:"
    assert result.answer == "Breakfast is served from 7 to 10 am."
    assert qa.lookups == []


@pytest.mark.asyncio
async def test_store_context_for_subject(make_completion, make_qa_repo, sample_qa_pairs):
    completion = make_completion()
    qa = make_qa_repo(pairs=sample_qa_pairs)
    await AnswerQuestionUseCase(completion, qa).execute(_request(subject_id="hotel-7"))

    assert qa.lookups == ["hotel-7"]
    prompt = completion.calls[0].user_prompt
    assert "Q: When is breakfast?\nA: From 7 to 10 am in the lobby restaurant." in prompt
    assert "\n\nQ: Is there parking?" in prompt


@pytest.mark.asyncio
async def test_store_rows_take_precedence_over_inline(make_completion, make_qa_repo, sample_qa_pairs):
    completion = make_completion()
    qa = make_qa_repo(pairs=sample_qa_pairs)
    await AnswerQuestionUseCase(completion, qa).execute(
        _request(subject_id="hotel-7", context="inline context")
    )
    assert "inline context" not in completion.calls[0].user_prompt


@pytest.mark.asyncio
async def test_inline_used_when_store_empty(make_completion, make_qa_repo):
    completion = make_completion()
    qa = make_qa_repo(pairs=[])
    await AnswerQuestionUseCase(completion, qa).execute(
        _request(subject_id="hotel-7", context="inline context")
    )
    assert "inline context" in completion.calls[0].user_prompt


@pytest.mark.asyncio
async def test_no_context_is_bad_request_without_completion(make_completion, make_qa_repo):
    completion = make_completion()
    qa = make_qa_repo(pairs=[])
    with pytest.raises(BadRequest):
        await AnswerQuestionUseCase(completion, qa).execute(_request(subject_id="hotel-7"))
    assert completion.calls == []


@pytest.mark.asyncio
async def test_blank_context_is_bad_request(make_completion, make_qa_repo):
    completion = make_completion()
    with pytest.raises(BadRequest):
        await AnswerQuestionUseCase(completion, make_qa_repo()).execute(_request(context="   "))
    assert completion.calls == []


@pytest.mark.asyncio
async def test_store_error_propagates(make_completion, make_qa_repo):
    completion = make_completion()
    qa = make_qa_repo(error=StoreError("Failed to fetch Q&A from database", "timeout"))
    with pytest.raises(StoreError):
        await AnswerQuestionUseCase(completion, qa).execute(_request(subject_id="hotel-7"))
    assert completion.calls == []
