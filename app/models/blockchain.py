"""
Pydantic models for mocked blockchain identity issuance.
"""

from pydantic import Field
from datetime import datetime
from typing import Optional, Dict, Any
from enum import Enum

from app.models.base import CamelModel


class IssuanceStatus(str, Enum):
    CONFIRMED = "CONFIRMED"
    PENDING = "PENDING"


class UserInfo(CamelModel):
    """Identity subject. Personal data, never returned by verify."""
    name: str = ""
    email: str = ""
    phone: str = ""


class IssuanceCreate(CamelModel):
    """Incoming POST /api/blockchain/issue body."""
    blockchain_id: str = Field("", description="Issuance key, 10-100 characters, globally unique")
    user_info: UserInfo = Field(default_factory=UserInfo)
    metadata: Optional[Dict[str, Any]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "blockchainId": "TSM-A1B2C3D4E5F6G7H8",
                "userInfo": {"name": "Priya Sharma", "email": "priya@example.com", "phone": "+919876543210"},
                "metadata": {"version": "1.0"},
            }
        }
        extra = "ignore"


class Issuance(CamelModel):
    """Stored issuance record."""
    id: str
    user_id: str
    blockchain_id: str
    user_info: UserInfo
    metadata: Dict[str, Any] = Field(default_factory=dict)
    transaction_hash: str
    block_number: int
    network_id: int
    contract_address: str
    token_id: int = Field(0, description="Sequence number, assigned by the store on insert")
    status: IssuanceStatus = IssuanceStatus.CONFIRMED
    created_at: datetime


class IssuanceReceipt(CamelModel):
    """What the caller gets back after a successful issue."""
    transaction_hash: str
    block_number: int
    network_id: int
    contract_address: str
    token_id: int
    explorer_url: str
    message: str = "Identity successfully issued to blockchain"


class Verification(CamelModel):
    """Public view of an issuance."""
    blockchain_id: str
    transaction_hash: str
    block_number: int
    network_id: int
    issued_at: Optional[str] = None
    status: IssuanceStatus
    verified: bool = True
