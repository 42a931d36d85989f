"""FastAPI dependencies shared by the API routers."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Header, Request

if TYPE_CHECKING:
    from lishe.containers import AppContainer


async def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UUID:
    """Resolve the caller's user id, rejecting unauthenticated requests."""
    container: AppContainer = request.app.state.container
    return container.auth_service.authenticate(authorization)
