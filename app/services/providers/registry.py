"""
Provider Registry.

Builds the chain and metrics providers selected in settings.
"""

from typing import Optional
import logging

from app.core.settings import settings
from app.services.providers.base import ChainProvider, MetricsProvider
from app.services.providers.mock_provider import (
    MockChainProvider,
    RandomMetricsProvider,
    StaticMetricsProvider,
)

logger = logging.getLogger(__name__)

_chain_provider: Optional[ChainProvider] = None
_metrics_provider: Optional[MetricsProvider] = None


def get_chain_provider() -> ChainProvider:
    global _chain_provider
    if _chain_provider is None:
        _chain_provider = MockChainProvider(
            network_id=settings.CHAIN_NETWORK_ID,
            contract_address=settings.CHAIN_CONTRACT_ADDRESS,
            explorer_base_url=settings.CHAIN_EXPLORER_URL,
        )
        logger.info(f"✅ Mock chain provider registered (network {settings.CHAIN_NETWORK_ID})")
    return _chain_provider


def get_metrics_provider() -> MetricsProvider:
    """
    Get the dashboard metrics provider.

    METRICS_PROVIDER=static gives deterministic figures; anything else
    falls back to the randomized provider.
    """
    global _metrics_provider
    if _metrics_provider is None:
        if settings.METRICS_PROVIDER.lower() == "static":
            _metrics_provider = StaticMetricsProvider()
        else:
            if settings.METRICS_PROVIDER.lower() != "random":
                logger.warning(f"Unknown METRICS_PROVIDER '{settings.METRICS_PROVIDER}', using random")
            _metrics_provider = RandomMetricsProvider()
        logger.info(f"✅ Metrics provider registered: {type(_metrics_provider).__name__}")
    return _metrics_provider
