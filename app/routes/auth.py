"""
Authentication endpoints - email + password sign-up and login.
"""

from fastapi import APIRouter, Depends, status
import logging

from app.core.errors import AppError, InternalError
from app.models.base import ok
from app.models.user import SignInRequest, SignUpRequest
from app.services.user_service import UserService, get_user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def sign_up(request: SignUpRequest, service: UserService = Depends(get_user_service)):
    """
    Register a new user.

    Returns:
        The user (without password hash) and an access token
    """
    try:
        return ok(service.sign_up(
            name=request.name,
            email=request.email,
            phone=request.phone,
            password=request.password,
        ))
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Signup error: {e}", exc_info=True)
        raise InternalError("Internal server error during signup")


@router.post("/login")
async def login(request: SignInRequest, service: UserService = Depends(get_user_service)):
    try:
        return ok(service.sign_in(email=request.email, password=request.password))
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Login error: {e}", exc_info=True)
        raise InternalError("Internal server error during login")
