"""
Emergency dispatch simulation for HIGH severity alerts.

Nothing is actually sent. The dispatch is a log line now and a
confirmation log line after a delay, on a daemon timer that nobody
waits for. It never touches the alert or the HTTP response.
"""

import threading
import logging

from app.models.alert import Alert

logger = logging.getLogger(__name__)


def _confirm_dispatch(alert_id: str) -> None:
    logger.info(f"✅ Emergency response team notified and dispatched (alert {alert_id})")


def schedule_emergency_dispatch(alert: Alert, delay_seconds: float = 1.0) -> threading.Timer:
    """
    Log the dispatch and schedule the delayed confirmation.

    Returns:
        The started timer (callers are free to ignore it)
    """
    logger.warning(f"🚁 High severity alert {alert.id} - dispatching emergency response team...")
    timer = threading.Timer(delay_seconds, _confirm_dispatch, args=(alert.id,))
    timer.daemon = True
    timer.start()
    return timer
