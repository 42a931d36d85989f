"""Supabase Auth gateway for resolving access tokens."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from lishe.services.auth import AuthGateway

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthGateway(AuthGateway):
    """Validates access tokens with Supabase Auth."""

    client: Client

    def resolve_user_id(self, access_token: str) -> UUID | None:
        """Return the user id behind a token, or None when it is rejected."""
        try:
            response = self.client.auth.get_user(access_token)
        except Exception:
            _logger.warning("Supabase rejected an access token", exc_info=True)
            return None
        user = getattr(response, "user", None)
        if user is None:
            return None
        return UUID(str(user.id))
