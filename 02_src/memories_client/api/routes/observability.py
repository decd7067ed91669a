"""Observability API routes: the diagnostic trace for debug panels."""

from typing import Literal

from pydantic import BaseModel
from fastapi import APIRouter

from ...app import Application


class TraceEventResponse(BaseModel):
    """Response model for trace event."""

    kind: Literal["request", "response", "error"]
    method: str | None = None
    url: str
    status: int | None = None
    message: str | None = None
    timestamp: int


def create_observability_router(app: Application) -> APIRouter:
    """Create observability router."""
    router = APIRouter(prefix="/api", tags=["observability"])

    @router.get("/trace-events", response_model=list[TraceEventResponse])
    async def get_trace_events() -> list[dict]:
        """Most recent traffic events, oldest first."""
        return [event.to_dict() for event in app.trace.snapshot()]

    return router
