"""
Celery tasks for fire-and-forget email notifications.

Notification failures are logged and dropped. They never propagate to the
request that triggered them and are not retried.
"""
import logging
from celery import shared_task

from inquiries.models import CallbackRequest, Contact, Order
from inquiries.services.mailer import NotificationMailer
from inquiries.services.notifications import (
    send_callback_notification,
    send_contact_notification,
    send_order_confirmation,
)

logger = logging.getLogger(__name__)


def _deliver(model, object_id: int, send, label: str) -> bool:
    """
    Load a record and send its notification through a fresh mailer.

    Returns:
        True if the notification was handed to the email backend
    """
    try:
        record = model.objects.get(id=object_id)
    except model.DoesNotExist:
        logger.error(f"{label} {object_id} not found, notification skipped")
        return False

    try:
        with NotificationMailer.from_settings() as mailer:
            sent = send(record, mailer)
    except Exception as e:
        logger.error(f"Email notification failed for {label} {object_id}: {e}", exc_info=True)
        return False

    logger.info(f"Email notification for {label} {object_id} sent={bool(sent)}")
    return bool(sent)


@shared_task(ignore_result=True)
def send_callback_notifications(callback_request_id: int) -> bool:
    return _deliver(CallbackRequest, callback_request_id, send_callback_notification, 'Callback request')


@shared_task(ignore_result=True)
def send_contact_notifications(contact_id: int) -> bool:
    return _deliver(Contact, contact_id, send_contact_notification, 'Contact')


@shared_task(ignore_result=True)
def send_order_notifications(order_id: int) -> bool:
    return _deliver(Order, order_id, send_order_confirmation, 'Order')


def enqueue_notification(task, object_id: int) -> None:
    """
    Hand a notification task to the broker without blocking the caller.

    A broker outage is logged; the primary operation has already succeeded.
    """
    try:
        task.delay(object_id)
    except Exception as e:
        logger.error(f"Could not enqueue {task.name} for {object_id}: {e}", exc_info=True)
