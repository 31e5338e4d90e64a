"""
Lifecycle management for callback requests.

Status transitions are unrestricted: any status may replace any
other. Only the allow-listed fields can change after creation, and the call
attempt counter moves only as a side effect of setting status to "called".
"""
import logging
from datetime import datetime
from typing import Optional

from django.db.models import F
from django.utils import timezone

from inquiries.models import CallbackRequest
from inquiries.services.dedup import ensure_not_duplicate
from inquiries.services.priority import classify_priority, estimated_call_time

logger = logging.getLogger(__name__)

ALLOWED_UPDATE_FIELDS = ('status', 'priority', 'assigned_to', 'notes', 'preferred_call_time')


class CallbackRequestNotFound(Exception):
    """Raised when no callback request exists for the given id."""

    def __init__(self, pk):
        self.pk = pk
        super().__init__(f"Callback request {pk} not found")


def create_callback_request(data: dict, now: Optional[datetime] = None) -> CallbackRequest:
    """
    Create a callback request from already-validated input.

    Workflow:
    1. Reject the submission if the phone number submitted recently
    2. Classify priority from service and message
    3. Persist with status PENDING and zero call attempts

    Args:
        data: Validated input with name, phone_number, selected_service and optional message

    Returns:
        The saved CallbackRequest

    Raises:
        DuplicateSubmissionError: If the dedup window already holds a request for this phone
    """
    phone_number = data['phone_number']
    message = data.get('message') or ''

    ensure_not_duplicate(phone_number, now=now)

    priority = classify_priority(data['selected_service'], message)

    callback_request = CallbackRequest.objects.create(
        name=data['name'],
        phone_number=phone_number,
        selected_service=data['selected_service'],
        message=message,
        priority=priority,
        status=CallbackRequest.Status.PENDING,
        call_attempts=0,
    )
    logger.info(
        f"Callback request {callback_request.id} created, "
        f"service={callback_request.selected_service}, priority={priority}"
    )
    return callback_request


def public_projection(callback_request: CallbackRequest) -> dict:
    """Fields returned to the customer after a successful submission."""
    return {
        'requestId': callback_request.id,
        'name': callback_request.name,
        'selectedService': callback_request.selected_service,
        'status': callback_request.status,
        'priority': callback_request.priority,
        'createdAt': callback_request.created_at,
        'estimatedCallTime': estimated_call_time(callback_request.priority),
    }


def get_callback_request(pk) -> CallbackRequest:
    try:
        return CallbackRequest.objects.get(pk=pk)
    except CallbackRequest.DoesNotExist:
        raise CallbackRequestNotFound(pk)


def update_callback_request(pk, patch: dict, now: Optional[datetime] = None) -> CallbackRequest:
    """
    Apply an administrative update.

    Fields outside ALLOWED_UPDATE_FIELDS are dropped without error. When the
    incoming status is "called", call_attempts is incremented in the same
    UPDATE statement and last_call_attempt is stamped.

    Raises:
        CallbackRequestNotFound: If no request exists for pk
    """
    now = now or timezone.now()

    update_data = {
        field: patch[field]
        for field in ALLOWED_UPDATE_FIELDS
        if field in patch
    }
    dropped = sorted(set(patch) - set(ALLOWED_UPDATE_FIELDS))
    if dropped:
        logger.debug(f"Callback request {pk}: ignoring non-updatable fields {dropped}")

    if update_data.get('status') == CallbackRequest.Status.CALLED:
        update_data['call_attempts'] = F('call_attempts') + 1
        update_data['last_call_attempt'] = now

    # QuerySet.update() bypasses auto_now
    update_data['updated_at'] = now

    updated = CallbackRequest.objects.filter(pk=pk).update(**update_data)
    if not updated:
        raise CallbackRequestNotFound(pk)

    callback_request = CallbackRequest.objects.get(pk=pk)
    logger.info(
        f"Callback request {pk} updated: status={callback_request.status}, "
        f"priority={callback_request.priority}, call_attempts={callback_request.call_attempts}"
    )
    return callback_request


def delete_callback_request(pk) -> None:
    """
    Permanently remove a callback request.

    Raises:
        CallbackRequestNotFound: If no request exists for pk
    """
    deleted, _ = CallbackRequest.objects.filter(pk=pk).delete()
    if not deleted:
        raise CallbackRequestNotFound(pk)
    logger.info(f"Callback request {pk} deleted")
