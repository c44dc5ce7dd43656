"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.adapters.persistence.database import Base


class GuestMessageModel(Base):
    __tablename__ = "guest_messages"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    hotel_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    original_language: Mapped[str | None] = mapped_column(String(10), nullable=True)

    sentiment: Mapped[str | None] = mapped_column(Text, nullable=True)
    urgency: Mapped[str | None] = mapped_column(Text, nullable=True)
    topic: Mapped[str | None] = mapped_column(String(50), nullable=True)
    subtopic: Mapped[str | None] = mapped_column(String(100), nullable=True)
    translated_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_translated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    target_language: Mapped[str | None] = mapped_column(String(10), nullable=True)
    ai_analysis_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("idx_guest_messages_hotel", "hotel_id"),
        Index("idx_guest_messages_topic", "topic"),
    )


class QARecommendationModel(Base):
    __tablename__ = "qa_recommendations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hotel_id: Mapped[str] = mapped_column(String(64), nullable=False)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (Index("idx_qa_hotel_active", "hotel_id", "is_active"),)
