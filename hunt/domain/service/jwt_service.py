"""JWT token domain service."""

import logfire

from hunt.config import AuthSettings
from hunt.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for operator session tokens.

    Tokens are self-contained capabilities: verifying one needs no
    server-side session state.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, operator_id: str, email: str) -> str:
        """Create JWT token for an operator.

        Args:
            operator_id: Operator ID
            email: Operator login email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", operator_id=operator_id):
            token = create_token(operator_id, email, self.auth_settings)
            logfire.info("JWT token created", operator_id=operator_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", operator_id=payload.operator_id)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
