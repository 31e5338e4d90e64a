"""
Duplicate guard for callback submissions.

A phone number may only submit one callback request per trailing window.
The lookup is not atomic with the insert that follows it, so two concurrent
submissions can both pass.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional

from django.conf import settings
from django.utils import timezone

from inquiries.models import CallbackRequest

logger = logging.getLogger(__name__)


class DuplicateSubmissionError(Exception):
    """Raised when a phone number already submitted within the dedup window."""

    def __init__(self, phone_number: str, existing_id: int):
        self.phone_number = phone_number
        self.existing_id = existing_id
        super().__init__(
            f"Callback request {existing_id} from {phone_number} was submitted recently"
        )


def get_dedup_window() -> timedelta:
    return timedelta(minutes=getattr(settings, 'CALLBACK_DEDUP_WINDOW_MINUTES', 60))


def find_recent_request(phone_number: str, now: Optional[datetime] = None) -> Optional[CallbackRequest]:
    """
    Return a request from the same phone number created within the window, if any.

    Args:
        phone_number: Deduplication key
        now: Reference time (defaults to the current time)
    """
    now = now or timezone.now()
    cutoff = now - get_dedup_window()
    return (
        CallbackRequest.objects
        .filter(phone_number=phone_number, created_at__gte=cutoff)
        .order_by('-created_at')
        .first()
    )


def ensure_not_duplicate(phone_number: str, now: Optional[datetime] = None) -> None:
    """
    Raises:
        DuplicateSubmissionError: If a recent request exists for the phone number
    """
    recent = find_recent_request(phone_number, now=now)
    if recent is not None:
        logger.info(
            f"Duplicate callback submission rejected: phone matches request {recent.id} "
            f"created at {recent.created_at.isoformat()}"
        )
        raise DuplicateSubmissionError(phone_number, recent.id)
