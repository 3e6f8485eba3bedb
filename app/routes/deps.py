"""
Shared route dependencies: authentication gate.
"""

from typing import Optional

from fastapi import Depends, Header

from app.models.user import TokenClaims
from app.services.token_service import TokenService, get_token_service


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract TOKEN from 'Bearer TOKEN'. Anything else counts as no token."""
    if not authorization:
        return None
    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


def get_current_user(
    authorization: Optional[str] = Header(None, description="Bearer access token"),
    tokens: TokenService = Depends(get_token_service)
) -> TokenClaims:
    """
    Resolve the caller from the Authorization header.

    Missing token → 401, invalid or expired token → 403 (AuthError).
    """
    return tokens.verify(_bearer_token(authorization))
