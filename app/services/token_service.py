"""
Token Service - issue and verify signed access tokens.

Tokens are HS256 JWTs carrying the user id and email, valid for
JWT_EXPIRY_DAYS (30 by default). There is no revocation.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import jwt

from app.core.errors import AuthError
from app.core.settings import settings
from app.models.user import TokenClaims

logger = logging.getLogger(__name__)


class TokenService:

    def __init__(self, secret: str, algorithm: str = "HS256", expiry_days: int = 30):
        self.secret = secret
        self.algorithm = algorithm
        self.expiry = timedelta(days=expiry_days)

    def issue(self, user_id: str, email: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "userId": user_id,
            "email": email,
            "iat": now,
            "exp": now + self.expiry,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Decode a token and return its claims.

        Raises:
            AuthError(401): no token supplied
            AuthError(403): bad signature, malformed or expired token
        """
        if not token:
            raise AuthError("Access token required", status_code=401)

        try:
            decoded = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as e:
            logger.warning(f"JWT verification failed: {e}")
            raise AuthError("Invalid or expired token", status_code=403)

        user_id = decoded.get("userId")
        if not user_id:
            logger.warning("JWT verification failed: token has no userId claim")
            raise AuthError("Invalid or expired token", status_code=403)

        return TokenClaims(user_id=str(user_id), email=decoded.get("email"))


# Global service instance (singleton pattern)
_token_service = None


def get_token_service() -> TokenService:
    """
    Get or create TokenService singleton instance.

    Returns:
        TokenService: The global token service instance
    """
    global _token_service
    if _token_service is None:
        _token_service = TokenService(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expiry_days=settings.JWT_EXPIRY_DAYS,
        )
    return _token_service
