"""
User models for authentication and user management.
"""

from pydantic import Field
from datetime import datetime
from typing import Optional

from app.models.base import CamelModel


class SignUpRequest(CamelModel):
    """Model for creating a new user."""
    name: str = Field("", description="Full name, 2-100 characters")
    email: str = Field("", description="Email address (stored lowercased)")
    phone: str = Field("", description="Mobile number with country code")
    password: str = Field("", description="At least 6 characters")


class SignInRequest(CamelModel):
    email: str = ""
    password: str = ""


class UserRecord(CamelModel):
    """Stored user. Only the credential store and service see password_hash."""
    id: str
    name: str
    email: str
    phone: str
    password_hash: str
    created_at: datetime


class UserResponse(CamelModel):
    """Model for user responses."""
    id: str = Field(..., description="User ID")
    name: str
    email: str
    phone: str
    created_at: datetime = Field(..., description="When user was created")

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls(**record.model_dump(exclude={"password_hash"}))


class AuthResponse(CamelModel):
    """Authentication response."""
    user: UserResponse
    token: str


class TokenClaims(CamelModel):
    """Identity carried by a verified access token."""
    user_id: str
    email: Optional[str] = None
