"""
Notification emails for new callback requests, contacts and orders.
"""
from django.template.loader import render_to_string

from inquiries.models import CallbackRequest, Contact, Order
from inquiries.services.mailer import NotificationMailer
from inquiries.services.priority import estimated_call_time


def render_callback_notification(callback_request: CallbackRequest) -> str:
    return render_to_string('inquiries/email/callback_notification.html', {
        'callback': callback_request,
        'estimated_call_time': estimated_call_time(callback_request.priority),
    })


def render_contact_notification(contact: Contact) -> str:
    return render_to_string('inquiries/email/contact_notification.html', {'contact': contact})


def render_order_confirmation(order: Order) -> str:
    return render_to_string('inquiries/email/order_confirmation.html', {'order': order})


def send_callback_notification(callback_request: CallbackRequest, mailer: NotificationMailer) -> int:
    """Notify the sales team about a new callback request."""
    subject = (
        f"[{callback_request.get_priority_display()} priority] "
        f"Callback request - {callback_request.selected_service}"
    )
    return mailer.send_to_sales(subject, render_callback_notification(callback_request))


def send_contact_notification(contact: Contact, mailer: NotificationMailer) -> int:
    """Notify the sales team about a new contact inquiry."""
    subject = f"New {contact.selected_plan} Inquiry - Contact Form"
    return mailer.send_to_sales(subject, render_contact_notification(contact))


def send_order_confirmation(order: Order, mailer: NotificationMailer) -> int:
    """Send the order and contract summary to the sales team."""
    subject = f"New Order {order.contract_number} - {order.package_details.get('name', order.selected_package)} Package"
    return mailer.send_to_sales(subject, render_order_confirmation(order))
