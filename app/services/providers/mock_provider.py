"""
Mock Providers - the values the demo dashboard and issuance flow show.

MockChainProvider generates random ledger attributes.
RandomMetricsProvider and StaticMetricsProvider generate dashboard
filler figures; the static one is fully deterministic.
"""

from typing import Dict, List, Optional
import random
import secrets
import logging

from app.services.providers.base import ChainProvider, MetricsProvider

logger = logging.getLogger(__name__)

DEFAULT_ALERT_BASELINE = {"total": 30, "HIGH": 39, "MEDIUM": 45, "LOW": 12}

RESPONSE_TIME_STATS = {
    "average": 12.5,
    "median": 10.2,
    "fastest": 4.1,
    "slowest": 28.7,
}

TOP_INCIDENT_AREAS = [
    {"name": "Downtown Market", "incidents": 15, "risk_level": "MEDIUM"},
    {"name": "Old Town Square", "incidents": 8, "risk_level": "LOW"},
    {"name": "Train Station Area", "incidents": 22, "risk_level": "HIGH"},
    {"name": "Tourist District", "incidents": 5, "risk_level": "LOW"},
    {"name": "Port Area", "incidents": 12, "risk_level": "MEDIUM"},
]

MOST_VISITED_REGION = "City Center"


class MockChainProvider(ChainProvider):
    """
    Random ledger attributes on a fixed network and contract.
    """

    BLOCK_NUMBER_FLOOR = 18_500_000
    BLOCK_NUMBER_SPAN = 1_000_000

    def __init__(self, network_id: int, contract_address: str, explorer_base_url: str):
        self._network_id = network_id
        self._contract_address = contract_address
        self._explorer_base_url = explorer_base_url.rstrip("/")

    def transaction_hash(self) -> str:
        return f"0x{secrets.token_hex(32)}"

    def block_number(self) -> int:
        return self.BLOCK_NUMBER_FLOOR + random.randrange(self.BLOCK_NUMBER_SPAN)

    def network_id(self) -> int:
        return self._network_id

    def contract_address(self) -> str:
        return self._contract_address

    def explorer_url(self, transaction_hash: str) -> str:
        return f"{self._explorer_base_url}/tx/{transaction_hash}"


class RandomMetricsProvider(MetricsProvider):
    """Randomized figures within fixed ranges, refreshed on every call."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _between(self, low: int, span: int) -> int:
        return low + self.rng.randrange(span)

    def alert_baseline(self) -> Dict[str, int]:
        return dict(DEFAULT_ALERT_BASELINE)

    def live_metrics(self) -> Dict:
        return {
            "active_tourists": self._between(200, 500),
            "pending_incidents": self._between(5, 20),
            "resolved_incidents": self._between(150, 100),
            "safety_score": self._between(80, 20),
            "avg_safety_score": self._between(75, 15),
            "avg_response_time": self._between(8, 10),
            "most_visited_region": MOST_VISITED_REGION,
            "active_tourists_chart": [self._between(low, 50) for low in (120, 140, 160, 200, 250, 280)],
        }

    def response_time_stats(self) -> Dict[str, float]:
        return dict(RESPONSE_TIME_STATS)

    def top_incident_areas(self) -> List[Dict]:
        return [dict(area) for area in TOP_INCIDENT_AREAS]


class StaticMetricsProvider(MetricsProvider):
    """Fixed figures (midpoints of the random ranges). Used for demos and tests."""

    def __init__(self, alert_baseline: Optional[Dict[str, int]] = None):
        self._alert_baseline = dict(alert_baseline if alert_baseline is not None else DEFAULT_ALERT_BASELINE)

    def alert_baseline(self) -> Dict[str, int]:
        return dict(self._alert_baseline)

    def live_metrics(self) -> Dict:
        return {
            "active_tourists": 450,
            "pending_incidents": 15,
            "resolved_incidents": 200,
            "safety_score": 90,
            "avg_safety_score": 82,
            "avg_response_time": 13,
            "most_visited_region": MOST_VISITED_REGION,
            "active_tourists_chart": [145, 165, 185, 225, 275, 305],
        }

    def response_time_stats(self) -> Dict[str, float]:
        return dict(RESPONSE_TIME_STATS)

    def top_incident_areas(self) -> List[Dict]:
        return [dict(area) for area in TOP_INCIDENT_AREAS]
