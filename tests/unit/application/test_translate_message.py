"""Tests for the translate-only task."""

import pytest

from app.application.prompts import TRANSLATE_SYSTEM
from app.application.use_cases.translate_message import TranslateMessageUseCase
from app.domain.entities.analysis import AnalysisRequest
from app.domain.errors import UpstreamError
from app.domain.value_objects.enums import TaskType


def _request(**kwargs) -> AnalysisRequest:
    return AnalysisRequest(task=TaskType.TRANSLATE, text="Hello", **kwargs)


@pytest.mark.asyncio
async def test_translate_to_french(make_completion):
    completion = make_completion({TRANSLATE_SYSTEM: "Bonjour"})
    result = await TranslateMessageUseCase(completion).execute(
        _request(original_language="en", target_language="fr")
    )

    call, = completion.calls
    assert call.temperature == 0.3
    assert call.max_tokens == 500
    assert "French" in call.user_prompt
    assert '"Hello"' in call.user_prompt
    assert result.translated_text == "Bonjour"
    assert result.is_translated is True
    assert result.target_language == "fr"


@pytest.mark.asyncio
async def test_missing_target_defaults_to_english_prompt(make_completion):
    completion = make_completion({TRANSLATE_SYSTEM: "Hello"})
    result = await TranslateMessageUseCase(completion).execute(_request(original_language="de"))

    assert "English" in completion.calls[0].user_prompt
    assert result.is_translated is False
    assert result.target_language is None


@pytest.mark.asyncio
async def test_same_language_still_calls_but_not_marked(make_completion):
    completion = make_completion({TRANSLATE_SYSTEM: "Hello"})
    result = await TranslateMessageUseCase(completion).execute(
        _request(original_language="en", target_language="EN")
    )
    assert len(completion.calls) == 1
    assert result.is_translated is False


@pytest.mark.asyncio
async def test_unknown_target_code_used_verbatim(make_completion):
    completion = make_completion({TRANSLATE_SYSTEM: "..."})
    await TranslateMessageUseCase(completion).execute(
        _request(original_language="en", target_language="xx")
    )
    assert "into xx." in completion.calls[0].user_prompt


@pytest.mark.asyncio
async def test_upstream_error_propagates(make_completion):
    completion = make_completion({TRANSLATE_SYSTEM: UpstreamError(401, "bad key")})
    with pytest.raises(UpstreamError):
        await TranslateMessageUseCase(completion).execute(
            _request(original_language="en", target_language="fr")
        )
