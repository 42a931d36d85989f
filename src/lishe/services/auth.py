"""Session authentication for API requests."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from lishe.errors import UnauthorizedError

_logger = logging.getLogger(__name__)

_BEARER_PREFIX = "bearer "


class AuthGateway(Protocol):
    """Interface to the identity provider."""

    def resolve_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid access token, otherwise None."""


@dataclass
class AuthService:
    """Turns an Authorization header into the caller's user id."""

    gateway: AuthGateway

    def authenticate(self, authorization: str | None) -> UUID:
        """Return the authenticated user id or raise UnauthorizedError."""
        token = _extract_bearer_token(authorization)
        if token is None:
            raise UnauthorizedError()
        user_id = self.gateway.resolve_user_id(token)
        if user_id is None:
            _logger.info("Rejected request with an invalid access token")
            raise UnauthorizedError()
        return user_id


def _extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    if not authorization.lower().startswith(_BEARER_PREFIX):
        return None
    token = authorization[len(_BEARER_PREFIX) :].strip()
    return token or None
