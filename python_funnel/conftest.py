import os
import sys
from datetime import datetime

import pytest

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'funnel_gateway.settings')


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def valid_callback_payload():
    """Return a valid callback submission as sent by the public form."""
    return {
        'name': 'Ayesha Khan',
        'phoneNumber': '+923001234567',
        'selectedService': 'Car Tracking',
        'message': 'Interested in tracking for two cars',
    }


@pytest.fixture
def valid_contact_payload():
    return {
        'fullName': 'Bilal Ahmed',
        'phoneNumber': '923331112233',
        'selectedPlan': 'Bike Tracking',
        'message': 'Do you cover Lahore?',
    }


@pytest.fixture
def valid_order_payload():
    return {
        'phoneNumber': '03001234567',
        'message': 'Please install on my Corolla',
        'selectedPackage': 'standard',
    }


@pytest.fixture
def make_callback(db):
    """
    Create a CallbackRequest directly in the database.

    created_at is auto_now_add, so a custom timestamp is applied with a
    follow-up UPDATE.
    """
    from inquiries.models import CallbackRequest

    counter = {'n': 0}

    def _make(created_at: datetime = None, **overrides):
        counter['n'] += 1
        fields = {
            'name': 'Test Customer',
            'phone_number': f'+92300{counter["n"]:07d}',
            'selected_service': 'Car Tracking',
            'message': '',
            'priority': CallbackRequest.Priority.MEDIUM,
            'status': CallbackRequest.Status.PENDING,
        }
        fields.update(overrides)
        callback_request = CallbackRequest.objects.create(**fields)
        if created_at is not None:
            CallbackRequest.objects.filter(pk=callback_request.pk).update(created_at=created_at)
            callback_request.refresh_from_db()
        return callback_request

    return _make
