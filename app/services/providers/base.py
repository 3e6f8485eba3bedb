"""
Provider Base Interfaces.

The chain and dashboard-metric values in this system are mocked.
They sit behind these interfaces so tests can inject deterministic
values instead of asserting on randomness.
"""

from abc import ABC, abstractmethod
from typing import Dict, List


class ChainProvider(ABC):
    """
    Source of ledger attributes for identity issuance.

    No real chain is contacted; implementations only generate values
    shaped like the ones a ledger would return.
    """

    @abstractmethod
    def transaction_hash(self) -> str:
        """0x-prefixed hex transaction reference."""
        pass

    @abstractmethod
    def block_number(self) -> int:
        pass

    @abstractmethod
    def network_id(self) -> int:
        pass

    @abstractmethod
    def contract_address(self) -> str:
        pass

    @abstractmethod
    def explorer_url(self, transaction_hash: str) -> str:
        """Human-readable link to the transaction."""
        pass


class MetricsProvider(ABC):
    """
    Source of dashboard figures that have no real backing data.
    """

    @abstractmethod
    def alert_baseline(self) -> Dict[str, int]:
        """
        Offsets added to today's real alert counts.

        Returns:
            Dict with keys "total", "HIGH", "MEDIUM", "LOW"
        """
        pass

    @abstractmethod
    def live_metrics(self) -> Dict:
        """
        Returns:
            Dict with active_tourists, pending_incidents, resolved_incidents,
            safety_score, avg_safety_score, avg_response_time,
            most_visited_region and active_tourists_chart (6 ints)
        """
        pass

    @abstractmethod
    def response_time_stats(self) -> Dict[str, float]:
        """Dict with average, median, fastest, slowest (minutes)."""
        pass

    @abstractmethod
    def top_incident_areas(self) -> List[Dict]:
        """List of {name, incidents, risk_level}."""
        pass
