"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from app.application.ports.completion_port import CompletionPort
from app.application.ports.guest_message_repo import GuestMessageRepository
from app.application.ports.qa_repo import QARepository
from app.application.prompts import (
    QA_SYSTEM,
    SENTIMENT_SYSTEM,
    TOPIC_SYSTEM,
    TRANSLATE_SYSTEM,
    URGENCY_SYSTEM,
)
from app.domain.entities.analysis import QAPair

# ─── In-memory fakes ────────────────────────────────────────────────


@dataclass
class CompletionCall:
    system_instruction: str
    user_prompt: str
    max_tokens: int
    temperature: float


DEFAULT_RESPONSES: dict[str, Any] = {
    SENTIMENT_SYSTEM: "negative",
    URGENCY_SYSTEM: "HIGH",
    TOPIC_SYSTEM: '{"topic": "housekeeping", "subtopic": "extra-towels"}',
    TRANSLATE_SYSTEM: "Ich brauche bitte mehr Handtücher.",
    QA_SYSTEM: "Breakfast is served from 7 to 10 am.",
}


class FakeCompletion(CompletionPort):
    """Answers by system instruction; an Exception value is raised instead."""

    def __init__(self, responses: dict[str, Any] | None = None, configured: bool = True):
        self._responses = {**DEFAULT_RESPONSES, **(responses or {})}
        self._configured = configured
        self.calls: list[CompletionCall] = []

    def is_configured(self) -> bool:
        return self._configured

    async def complete(self, system_instruction, user_prompt, max_tokens, temperature):
        self.calls.append(
            CompletionCall(system_instruction, user_prompt, max_tokens, temperature)
        )
        response = self._responses.get(system_instruction, "")
        if isinstance(response, Exception):
            raise response
        return response

    def calls_for(self, system_instruction: str) -> list[CompletionCall]:
        return [c for c in self.calls if c.system_instruction == system_instruction]


class FakeGuestMessageRepo(GuestMessageRepository):
    def __init__(
        self,
        rows: int = 1,
        error: Exception | None = None,
        columns: frozenset[str] | None = None,
    ):
        self._rows = rows
        self._columns = columns
        self._error = error
        self.patches: list[tuple[str, dict[str, Any]]] = []
        self.commits = 0
        self.rollbacks = 0

    def storable_fields(self, fields):
        if self._columns is None:
            return dict(fields)
        return {k: v for k, v in fields.items() if k in self._columns}

    async def patch(self, message_id, fields):
        self.patches.append((message_id, fields))
        if self._error:
            raise self._error
        return self._rows

    async def commit(self):
        self.commits += 1

    async def rollback(self):
        self.rollbacks += 1


class FakeQARepo(QARepository):
    def __init__(self, pairs: list[QAPair] | None = None, error: Exception | None = None):
        self._pairs = pairs or []
        self._error = error
        self.lookups: list[str] = []

    async def list_active(self, subject_id):
        self.lookups.append(subject_id)
        if self._error:
            raise self._error
        return list(self._pairs)


# ─── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture
def make_completion():
    return FakeCompletion


@pytest.fixture
def make_message_repo():
    return FakeGuestMessageRepo


@pytest.fixture
def make_qa_repo():
    return FakeQARepo


@pytest.fixture
def sample_guest_message():
    return "Could I please get some extra towels in room 412?"


@pytest.fixture
def sample_qa_pairs():
    return [
        QAPair(question="When is breakfast?", answer="From 7 to 10 am in the lobby restaurant."),
        QAPair(question="Is there parking?", answer="Yes, underground, 20 EUR per night."),
    ]
