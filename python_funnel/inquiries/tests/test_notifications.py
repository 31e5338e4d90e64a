"""
Tests for the mailer, notification rendering and notification tasks.
"""
import smtplib
from unittest.mock import Mock, patch

import pytest
from django.core import mail

from inquiries.models import Contact
from inquiries.services.mailer import NotificationMailer
from inquiries.services.notifications import (
    render_callback_notification,
    send_callback_notification,
)
from inquiries.services.orders import create_order
from inquiries.tasks import (
    enqueue_notification,
    send_callback_notifications,
    send_contact_notifications,
    send_order_notifications,
)


class TestNotificationMailer:
    """Tests for NotificationMailer."""

    def test_verify_success(self):
        connection = Mock()
        mailer = NotificationMailer(connection=connection, from_email='sales@example.com')

        assert mailer.verify() is True
        connection.open.assert_called_once()
        connection.close.assert_called_once()

    @pytest.mark.parametrize('error', [
        smtplib.SMTPAuthenticationError(535, b'bad credentials'),
        ConnectionRefusedError('refused'),
    ])
    def test_verify_failure(self, error):
        connection = Mock()
        connection.open.side_effect = error
        mailer = NotificationMailer(connection=connection, from_email='sales@example.com')

        assert mailer.verify() is False

    def test_context_manager_opens_and_closes(self):
        connection = Mock()

        with NotificationMailer(connection=connection, from_email='a@example.com') as mailer:
            assert mailer.connection is connection
            connection.open.assert_called_once()

        connection.close.assert_called_once()

    def test_send_html_with_text_fallback(self):
        mailer = NotificationMailer(from_email='sales@example.com')

        sent = mailer.send('Hello', '<p>Hi <b>there</b></p>', ['team@example.com'])

        assert sent == 1
        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ['team@example.com']
        assert message.from_email == 'sales@example.com'
        assert message.body == 'Hi there'
        assert message.alternatives[0][1] == 'text/html'

    def test_send_without_recipients_skips(self):
        mailer = NotificationMailer(from_email='sales@example.com', sales_recipients=[])

        assert mailer.send_to_sales('Hello', '<p>Hi</p>') == 0
        assert mail.outbox == []


@pytest.mark.django_db
class TestCallbackNotification:
    def test_rendered_body_contains_request_details(self, make_callback):
        callback_request = make_callback(
            name='Ayesha Khan',
            phone_number='923001234567',
            priority='high',
            message='Call me asap',
        )

        html = render_callback_notification(callback_request)

        assert 'Ayesha Khan' in html
        assert '+923001234567' in html
        assert 'Call me asap' in html
        assert 'within 2 hours' in html

    def test_message_block_omitted_when_blank(self, make_callback):
        callback_request = make_callback(message='')

        assert 'Message:' not in render_callback_notification(callback_request)

    def test_subject_mentions_priority_and_service(self, make_callback):
        callback_request = make_callback(priority='high', selected_service='Fleet Management')
        mailer = NotificationMailer(from_email='a@example.com', sales_recipients=['sales@example.com'])

        send_callback_notification(callback_request, mailer)

        assert mail.outbox[0].subject == '[High priority] Callback request - Fleet Management'


@pytest.mark.django_db
class TestNotificationTasks:
    """Tests for the fire-and-forget notification tasks."""

    def test_callback_notification_sent_to_sales(self, make_callback, settings):
        settings.SALES_NOTIFICATION_EMAILS = ['sales@example.com', 'lead@example.com']
        callback_request = make_callback()

        assert send_callback_notifications(callback_request.id) is True

        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == ['sales@example.com', 'lead@example.com']

    def test_contact_notification(self, settings):
        settings.SALES_NOTIFICATION_EMAILS = ['sales@example.com']
        contact = Contact.objects.create(
            full_name='Bilal Ahmed', phone_number='923331112233', selected_plan='Bike Tracking',
        )

        assert send_contact_notifications(contact.id) is True
        assert mail.outbox[0].subject == 'New Bike Tracking Inquiry - Contact Form'

    def test_order_notification_lists_features(self, settings):
        settings.SALES_NOTIFICATION_EMAILS = ['sales@example.com']
        order = create_order({
            'phone_number': '03001234567',
            'message': 'Install please',
            'selected_package': 'premium',
        })

        assert send_order_notifications(order.id) is True
        html = mail.outbox[0].alternatives[0][0]
        assert order.contract_number in html
        assert 'Multi-Layer Maps' in html

    def test_missing_record_is_logged_not_raised(self):
        assert send_callback_notifications(424242) is False
        assert mail.outbox == []

    @patch('inquiries.tasks.send_callback_notification')
    def test_transport_failure_is_absorbed(self, mock_send, make_callback, settings):
        settings.SALES_NOTIFICATION_EMAILS = ['sales@example.com']
        mock_send.side_effect = smtplib.SMTPServerDisconnected('connection lost')
        callback_request = make_callback()

        assert send_callback_notifications(callback_request.id) is False

    def test_enqueue_swallows_broker_failure(self):
        task = Mock()
        task.name = 'inquiries.tasks.send_callback_notifications'
        task.delay.side_effect = ConnectionError('broker down')

        enqueue_notification(task, 1)

        task.delay.assert_called_once_with(1)
