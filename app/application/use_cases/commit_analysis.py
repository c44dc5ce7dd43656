"""CommitAnalysisUseCase — write an analysis back onto its guest message."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from app.application.ports.guest_message_repo import GuestMessageRepository
from app.domain.entities.analysis import PersistenceOutcome
from app.domain.errors import StoreError

logger = logging.getLogger(__name__)


class CommitAnalysisUseCase:
    """Persists result fields; failures are reported, never raised."""

    def __init__(self, message_repo: GuestMessageRepository):
        self._messages = message_repo

    async def execute(self, message_id: str | None, fields: dict[str, Any]) -> PersistenceOutcome:
        if not message_id:
            logger.warning("No message_id provided, skipping database update")
            return PersistenceOutcome(attempted=False, ok=False, detail="no identifier provided")

        if not self._messages.storable_fields(fields):
            logger.warning("No storable result fields for message %s, skipping database update", message_id)
            return PersistenceOutcome(attempted=False, ok=False, detail="no result fields to store")

        patch = {
            **fields,
            "ai_analysis_completed": True,
            "updated_at": datetime.now(timezone.utc),
        }

        try:
            rows = await self._messages.patch(message_id, patch)
            if rows != 1:
                await self._messages.rollback()
                logger.error("Database update for message %s matched %d rows", message_id, rows)
                return PersistenceOutcome(
                    attempted=True,
                    ok=False,
                    detail="no record matched" if rows == 0 else f"{rows} records matched",
                )
            await self._messages.commit()
        except StoreError as e:
            logger.error("Database update failed for message %s: %s", message_id, e)
            try:
                await self._messages.rollback()
            except StoreError:
                logger.exception("Rollback failed for message %s", message_id)
            return PersistenceOutcome(attempted=True, ok=False, detail=e.details or e.error)

        logger.info("Database updated for message %s", message_id)
        return PersistenceOutcome(attempted=True, ok=True, detail=rows)
