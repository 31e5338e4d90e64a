"""
App configuration for the inquiries app.
"""
import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class InquiriesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'inquiries'

    def ready(self):
        if not getattr(settings, 'EMAIL_VERIFY_ON_STARTUP', False):
            return

        from inquiries.services.mailer import NotificationMailer

        mailer = NotificationMailer.from_settings()
        if mailer.verify():
            logger.info("Email transport verified on startup")
        else:
            logger.warning("Email transport could not be verified on startup, notifications may fail")
