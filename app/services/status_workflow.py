"""
Alert Status Workflow - forward-only state machine.

DESIGN PRINCIPLES:
- No backward transitions
- Re-entering the current state is a valid no-op (acknowledge is idempotent)
- Invalid transitions rejected programmatically
"""

from typing import Dict, List
import logging

from app.core.errors import ConflictError
from app.models.alert import AlertStatus

logger = logging.getLogger(__name__)


class AlertWorkflow:
    """
    State machine for alert status transitions.

    ACTIVE → ACKNOWLEDGED → RESOLVED
    """

    # Allowed transitions map: {from_status: [to_status, ...]}
    ALLOWED_TRANSITIONS: Dict[AlertStatus, List[AlertStatus]] = {
        AlertStatus.ACTIVE: [AlertStatus.ACKNOWLEDGED],
        AlertStatus.ACKNOWLEDGED: [AlertStatus.RESOLVED],
        AlertStatus.RESOLVED: []  # Terminal state
    }

    @classmethod
    def is_valid_transition(cls, from_status: AlertStatus, to_status: AlertStatus) -> bool:
        # Same status is always valid (no-op)
        if from_status == to_status:
            return True
        return to_status in cls.ALLOWED_TRANSITIONS.get(from_status, [])

    @classmethod
    def get_allowed_transitions(cls, current_status: AlertStatus) -> List[str]:
        return [status.value for status in cls.ALLOWED_TRANSITIONS.get(current_status, [])]

    @classmethod
    def validate_transition(cls, current_status: AlertStatus, new_status: AlertStatus) -> None:
        """
        Raises:
            ConflictError: if the transition would move the alert backward
        """
        if not cls.is_valid_transition(current_status, new_status):
            allowed = cls.get_allowed_transitions(current_status)
            logger.info(f"Rejected alert transition {current_status.value} → {new_status.value} (allowed: {allowed})")
            raise ConflictError(f"Alert is already {current_status.value.lower()}")
