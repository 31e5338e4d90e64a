"""
Priority classification for incoming callback requests.

The classifier only ever promotes a request to HIGH or leaves it at MEDIUM.
LOW exists for administrators to demote requests by hand.
"""
import logging
from typing import Optional

from inquiries.models import CallbackRequest, TrackingService

logger = logging.getLogger(__name__)

Priority = CallbackRequest.Priority

URGENT_KEYWORDS = ('urgent', 'asap')

# Explicit total order used for sorting: higher rank comes first
PRIORITY_RANK = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}

ESTIMATED_CALL_TIMES = {
    Priority.HIGH: 'Within 2 hours',
    Priority.MEDIUM: 'Within 24 hours',
    Priority.LOW: 'Within 48 hours',
}
DEFAULT_ESTIMATED_CALL_TIME = 'Within 24 hours'


def classify_priority(service: str, message: Optional[str] = None) -> str:
    """
    Derive the priority tier for a new callback request.

    Rules (first match wins):
    1. Fleet Management requests are always HIGH
    2. A message mentioning "urgent" or "asap" (any case) is HIGH
    3. Everything else is MEDIUM

    Args:
        service: Selected tracking service
        message: Optional free-text message from the customer

    Returns:
        One of the CallbackRequest.Priority values
    """
    if service == TrackingService.FLEET_MANAGEMENT:
        logger.debug("Priority HIGH: fleet management request")
        return Priority.HIGH

    if message:
        lowered = message.lower()
        if any(keyword in lowered for keyword in URGENT_KEYWORDS):
            logger.debug("Priority HIGH: urgent keyword in message")
            return Priority.HIGH

    return Priority.MEDIUM


def estimated_call_time(priority: str) -> str:
    """Human-readable response-time promise for a priority tier."""
    return ESTIMATED_CALL_TIMES.get(priority, DEFAULT_ESTIMATED_CALL_TIME)
