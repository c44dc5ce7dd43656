"""SQLAlchemy repository implementations."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.models import GuestMessageModel, QARecommendationModel
from app.application.ports.guest_message_repo import GuestMessageRepository
from app.application.ports.qa_repo import QARepository
from app.domain.entities.analysis import QAPair
from app.domain.errors import StoreError

logger = logging.getLogger(__name__)

# Columns a patch may touch; the primary key is never patched.
PATCHABLE_COLUMNS = frozenset(
    c.key for c in GuestMessageModel.__table__.columns if c.key != "id"
)


class SqlGuestMessageRepository(GuestMessageRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    def storable_fields(self, fields: dict[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in fields.items() if k in PATCHABLE_COLUMNS}

    async def patch(self, message_id: str, fields: dict[str, Any]) -> int:
        values = self.storable_fields(fields)
        ignored = sorted(set(fields) - set(values))
        if ignored:
            logger.debug("Ignoring non-column fields for guest_messages: %s", ignored)

        try:
            result = await self._s.execute(
                update(GuestMessageModel)
                .where(GuestMessageModel.id == message_id)
                .values(**values)
            )
            await self._s.flush()
        except (SQLAlchemyError, OSError) as e:
            raise StoreError("Failed to update guest message", str(e)) from e
        return result.rowcount

    async def commit(self) -> None:
        try:
            await self._s.commit()
        except (SQLAlchemyError, OSError) as e:
            raise StoreError("Failed to commit guest message update", str(e)) from e

    async def rollback(self) -> None:
        try:
            await self._s.rollback()
        except (SQLAlchemyError, OSError) as e:
            raise StoreError("Failed to roll back guest message update", str(e)) from e


class SqlQARepository(QARepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def list_active(self, subject_id: str) -> list[QAPair]:
        try:
            result = await self._s.execute(
                select(QARecommendationModel)
                .where(
                    QARecommendationModel.hotel_id == subject_id,
                    QARecommendationModel.is_active.is_(True),
                )
                .order_by(QARecommendationModel.id)
            )
        except (SQLAlchemyError, OSError) as e:
            raise StoreError("Failed to fetch Q&A from database", str(e)) from e
        return [QAPair(question=m.question, answer=m.answer) for m in result.scalars()]
