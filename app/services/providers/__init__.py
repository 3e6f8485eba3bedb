"""
Mock providers for values with no real backing system.

Chain attributes (identity issuance) and dashboard filler metrics
are pluggable so they can be swapped for deterministic ones.
"""

from app.services.providers.base import ChainProvider, MetricsProvider
from app.services.providers.mock_provider import (
    MockChainProvider,
    RandomMetricsProvider,
    StaticMetricsProvider,
)
from app.services.providers.registry import get_chain_provider, get_metrics_provider

__all__ = [
    "ChainProvider",
    "MetricsProvider",
    "MockChainProvider",
    "RandomMetricsProvider",
    "StaticMetricsProvider",
    "get_chain_provider",
    "get_metrics_provider",
]
