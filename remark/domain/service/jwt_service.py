"""JWT token domain service.

Tokens are minted by the identity provider in front of this service (or by
scripts/issue_token.py in development). The only claim we rely on is
user_id, which must be a UUID.
"""

from uuid import UUID

import logfire

from remark.config import AuthSettings
from remark.domain.value import UserId
from remark.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId) -> str:
        """Create JWT token for user."""
        token = create_token(str(user_id), self.auth_settings)
        logfire.info("JWT token created", user_id=str(user_id))
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Resolve the user a token identifies, without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID, or None if the token is missing, invalid, expired, or
            carries a user_id that is not a UUID
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError:
            return None

        try:
            return UserId(UUID(payload.user_id))
        except ValueError:
            logfire.warn("Token carries a malformed user_id", user_id=payload.user_id)
            return None
