"""
Blockchain identity endpoints - issue, verify and list mocked issuances.
"""

from fastapi import APIRouter, Depends, status
import logging

from app.core.errors import AppError, InternalError
from app.models.base import ok
from app.models.blockchain import IssuanceCreate
from app.models.user import TokenClaims
from app.routes.deps import get_current_user
from app.services.issuance_service import IssuanceService, get_issuance_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/blockchain", tags=["Blockchain"])


@router.post("/issue", status_code=status.HTTP_201_CREATED)
async def issue_identity(
    body: IssuanceCreate,
    user: TokenClaims = Depends(get_current_user),
    service: IssuanceService = Depends(get_issuance_service)
):
    """
    Issue an identity record for a new blockchain id.

    Returns the mock transaction details and an explorer link.
    """
    try:
        receipt = service.issue(
            user_id=user.user_id,
            blockchain_id=body.blockchain_id,
            user_info=body.user_info,
            metadata=body.metadata,
        )
        return ok(receipt)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Blockchain issuance error: {e}", exc_info=True)
        raise InternalError("Internal server error during blockchain issuance")


@router.get("/verify/{blockchain_id}")
async def verify_identity(
    blockchain_id: str,
    service: IssuanceService = Depends(get_issuance_service)
):
    """
    Public verification. No authentication, no personal data in the response.
    """
    try:
        return ok(service.verify(blockchain_id))
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Blockchain verification error: {e}", exc_info=True)
        raise InternalError("Internal server error during verification")


@router.get("/issuances")
async def list_issuances(
    user: TokenClaims = Depends(get_current_user),
    service: IssuanceService = Depends(get_issuance_service)
):
    """All issuances owned by the caller, newest first."""
    try:
        return ok({"issuances": service.list_for_user(user.user_id)})
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Get issuances error: {e}", exc_info=True)
        raise InternalError("Internal server error while fetching issuances")
