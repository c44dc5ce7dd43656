"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import get_session
from app.application.ports.completion_port import CompletionPort
from app.infrastructure.api.dependencies import get_completion

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    session: AsyncSession = Depends(get_session),
    completion: CompletionPort = Depends(get_completion),
):
    """Check API, database connectivity and completion credential."""
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {e}"

    return {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "completion_configured": completion.is_configured(),
        "service": "Guest Message Analyzer",
    }
