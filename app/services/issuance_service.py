"""
Issuance Service - mocked blockchain identity issuance and verification.

No ledger is contacted. Chain attributes come from a ChainProvider;
uniqueness of the blockchain id and the token sequence are enforced
by the IssuanceStore under its writer lock.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import uuid
import logging

from app.core.errors import NotFoundError, ValidationError
from app.models.blockchain import (
    Issuance,
    IssuanceReceipt,
    IssuanceStatus,
    UserInfo,
    Verification,
)
from app.services.providers import ChainProvider, get_chain_provider
from app.storage.base import IssuanceStore
from app.storage.registry import get_storage
from app.utils.security import normalize_email, normalize_phone

logger = logging.getLogger(__name__)


class IssuanceService:

    def __init__(self, store: IssuanceStore, chain: ChainProvider):
        self.store = store
        self.chain = chain

    def _validate(self, blockchain_id: str, user_info: UserInfo) -> None:
        """Raise ValidationError for the first invalid field."""
        if not 10 <= len((blockchain_id or "").strip()) <= 100:
            raise ValidationError("Invalid blockchain ID")
        if not 2 <= len((user_info.name or "").strip()) <= 100:
            raise ValidationError("Invalid user name")
        if normalize_email(user_info.email) is None:
            raise ValidationError("Invalid email address")
        if normalize_phone(user_info.phone) is None:
            raise ValidationError("Invalid phone number")

    def issue(
        self,
        user_id: str,
        blockchain_id: str,
        user_info: UserInfo,
        metadata: Optional[Dict[str, Any]] = None
    ) -> IssuanceReceipt:
        """
        Record a CONFIRMED issuance for a new blockchain id.

        Raises:
            ValidationError: first invalid field
            ConflictError: blockchain id already issued
        """
        self._validate(blockchain_id, user_info)

        now = datetime.now(timezone.utc)
        transaction_hash = self.chain.transaction_hash()

        issuance = self.store.insert(Issuance(
            id=str(uuid.uuid4()),
            user_id=user_id,
            blockchain_id=blockchain_id.strip(),
            user_info=UserInfo(
                name=user_info.name.strip(),
                email=user_info.email.strip(),
                phone=user_info.phone.strip(),
            ),
            metadata={**(metadata or {}), "issuedAt": now.isoformat()},
            transaction_hash=transaction_hash,
            block_number=self.chain.block_number(),
            network_id=self.chain.network_id(),
            contract_address=self.chain.contract_address(),
            status=IssuanceStatus.CONFIRMED,
            created_at=now,
        ))

        logger.info(f"⛓️ Identity issued: {issuance.blockchain_id} token={issuance.token_id} tx={transaction_hash}")

        return IssuanceReceipt(
            transaction_hash=issuance.transaction_hash,
            block_number=issuance.block_number,
            network_id=issuance.network_id,
            contract_address=issuance.contract_address,
            token_id=issuance.token_id,
            explorer_url=self.chain.explorer_url(issuance.transaction_hash),
        )

    def verify(self, blockchain_id: str) -> Verification:
        """
        Public verification view (no personal data).

        Raises:
            NotFoundError: unknown blockchain id
        """
        issuance = self.store.get_by_key(blockchain_id)
        if issuance is None:
            raise NotFoundError("Blockchain identity not found")

        return Verification(
            blockchain_id=issuance.blockchain_id,
            transaction_hash=issuance.transaction_hash,
            block_number=issuance.block_number,
            network_id=issuance.network_id,
            issued_at=issuance.metadata.get("issuedAt"),
            status=issuance.status,
        )

    def list_for_user(self, user_id: str) -> List[Issuance]:
        return self.store.list_by_user(user_id)


# Global service instance (singleton pattern)
_issuance_service = None


def get_issuance_service() -> IssuanceService:
    global _issuance_service
    if _issuance_service is None:
        _issuance_service = IssuanceService(store=get_storage().issuances, chain=get_chain_provider())
    return _issuance_service
