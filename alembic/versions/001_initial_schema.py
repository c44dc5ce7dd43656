"""Initial schema — guest messages and Q&A recommendations.

Revision ID: 001
Revises: None
Create Date: 2026-10-16
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Guest messages
    op.create_table(
        "guest_messages",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("hotel_id", sa.String(64), nullable=True),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("original_language", sa.String(10), nullable=True),
        sa.Column("sentiment", sa.Text(), nullable=True),
        sa.Column("urgency", sa.Text(), nullable=True),
        sa.Column("topic", sa.String(50), nullable=True),
        sa.Column("subtopic", sa.String(100), nullable=True),
        sa.Column("translated_text", sa.Text, nullable=True),
        sa.Column("is_translated", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("target_language", sa.String(10), nullable=True),
        sa.Column(
            "ai_analysis_completed", sa.Boolean, nullable=False, server_default=sa.false()
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("idx_guest_messages_hotel", "guest_messages", ["hotel_id"])
    op.create_index("idx_guest_messages_topic", "guest_messages", ["topic"])

    # Q&A recommendations
    op.create_table(
        "qa_recommendations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("hotel_id", sa.String(64), nullable=False),
        sa.Column("question", sa.Text, nullable=False),
        sa.Column("answer", sa.Text, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "idx_qa_hotel_active", "qa_recommendations", ["hotel_id", "is_active"]
    )


def downgrade() -> None:
    op.drop_index("idx_qa_hotel_active", table_name="qa_recommendations")
    op.drop_table("qa_recommendations")
    op.drop_index("idx_guest_messages_topic", table_name="guest_messages")
    op.drop_index("idx_guest_messages_hotel", table_name="guest_messages")
    op.drop_table("guest_messages")
