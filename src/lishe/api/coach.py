"""AI coach endpoints."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from lishe.api.dependencies import require_user
from lishe.api.schemas import CoachMessage  # noqa: TC001

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from lishe.containers import AppContainer

router = APIRouter(tags=["coach"])


@router.post("/analysis")
async def analyze(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return a structured analysis of recent eating."""
    container: AppContainer = request.app.state.container
    analysis = await container.coach_service.analyze(user_id)
    return analysis.model_dump()


@router.post("/coach/messages")
async def coach_message(
    payload: CoachMessage, request: Request, user_id: UUID = Depends(require_user)
) -> StreamingResponse:
    """Stream the coach's reply as server-sent events."""
    container: AppContainer = request.app.state.container
    chunks = container.coach_service.chat(user_id, payload.content)
    return StreamingResponse(_sse_events(chunks), media_type="text/event-stream")


async def _sse_events(chunks: AsyncIterator[str]) -> AsyncIterator[str]:
    async for chunk in chunks:
        yield f"data: {json.dumps({'content': chunk})}\n\n"
    yield f"data: {json.dumps({'done': True})}\n\n"
