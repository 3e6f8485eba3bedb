"""
User Service - sign-up and sign-in with email and password.
"""

from datetime import datetime, timezone
import uuid
import logging

from app.core.errors import AuthError, ValidationError
from app.core.settings import settings
from app.models.user import AuthResponse, UserRecord, UserResponse
from app.services.token_service import TokenService, get_token_service
from app.storage.base import UserStore
from app.storage.registry import get_storage
from app.utils.security import hash_password, normalize_email, normalize_phone, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class UserService:
    """
    Service for user registration and login.
    """

    def __init__(self, users: UserStore, tokens: TokenService, bcrypt_rounds: int = 12):
        self.users = users
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds

    def sign_up(self, name: str, email: str, phone: str, password: str) -> AuthResponse:
        """
        Register a new user and log them in.

        Raises:
            ValidationError: first invalid field
            ConflictError: email already registered
        """
        name = (name or "").strip()
        if not 2 <= len(name) <= 100:
            raise ValidationError("Name must be between 2 and 100 characters")

        normalized_email = normalize_email(email)
        if normalized_email is None:
            raise ValidationError("Must be a valid email address")

        normalized_phone = normalize_phone(phone)
        if normalized_phone is None:
            raise ValidationError("Must be a valid phone number")

        if len(password or "") < 6:
            raise ValidationError("Password must be at least 6 characters long")

        user = self.users.create(UserRecord(
            id=str(uuid.uuid4()),
            name=name,
            email=normalized_email,
            phone=normalized_phone,
            password_hash=hash_password(password, rounds=self.bcrypt_rounds),
            created_at=datetime.now(timezone.utc),
        ))

        logger.info(f"User created: {user.id} ({user.email})")
        return AuthResponse(user=UserResponse.from_record(user), token=self.tokens.issue(user.id, user.email))

    def sign_in(self, email: str, password: str) -> AuthResponse:
        """
        Raises:
            ValidationError: malformed email or empty password
            AuthError(401): unknown email or wrong password
        """
        normalized_email = normalize_email(email)
        if normalized_email is None:
            raise ValidationError("Must be a valid email address")
        if not password:
            raise ValidationError("Password is required")

        user = self.users.find_by_email(normalized_email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info(f"Failed login for {normalized_email}")
            raise AuthError(INVALID_CREDENTIALS, status_code=401)

        logger.info(f"User authenticated: {user.id} ({user.email})")
        return AuthResponse(user=UserResponse.from_record(user), token=self.tokens.issue(user.id, user.email))


# Global service instance (singleton pattern)
_user_service = None


def get_user_service() -> UserService:
    """
    Get or create UserService singleton instance.

    Returns:
        UserService: The global user service instance
    """
    global _user_service
    if _user_service is None:
        _user_service = UserService(
            users=get_storage().users,
            tokens=get_token_service(),
            bcrypt_rounds=settings.BCRYPT_ROUNDS,
        )
    return _user_service
