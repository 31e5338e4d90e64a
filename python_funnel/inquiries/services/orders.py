"""
Package catalog and order creation.
"""
import copy
import logging
import secrets
from datetime import datetime
from typing import Optional

from django.utils import timezone

from inquiries.models import Order

logger = logging.getLogger(__name__)

BASE_FEATURES = [
    '24/7 Control Room Monitoring',
    'Real-time tracking',
    'Geofencing Tracking',
    'Web Access Portal',
    'Mobile App (iOS/Android)',
    'Share Track Via Web & Mobile App',
    'Command Geo Fencing Call',
    'Customized Geo Fencing Call',
    'Battery Tempering Call',
    'Battery Voltage Alert via App',
]

STANDARD_FEATURES = BASE_FEATURES + [
    'SOS Class Distance Alerts via App',
    'Ignition ON/OFF Alerts via App',
]

PREMIUM_FEATURES = STANDARD_FEATURES + [
    'Multi-Layer Maps',
    'Periodic Maintenance',
    'Custom on Demand',
    'Assistance in Their Case',
]

PACKAGE_DETAILS = {
    Order.Package.BASIC: {'name': 'Basic', 'price': 14000, 'features': BASE_FEATURES},
    Order.Package.STANDARD: {'name': 'Standard', 'price': 21000, 'features': STANDARD_FEATURES},
    Order.Package.PREMIUM: {'name': 'Premium', 'price': 28000, 'features': PREMIUM_FEATURES},
}

CONTRACT_PREFIX = 'TRK'
MAX_CONTRACT_NUMBER_ATTEMPTS = 5


def get_package_details(package: str) -> dict:
    """Return a copy of the catalog entry so orders never share the catalog lists."""
    return copy.deepcopy(PACKAGE_DETAILS[package])


def generate_contract_number(now: Optional[datetime] = None) -> str:
    """Contract numbers look like TRK-20240131-9F3A0C."""
    now = timezone.localtime(now or timezone.now())
    return f"{CONTRACT_PREFIX}-{now:%Y%m%d}-{secrets.token_hex(3).upper()}"


def unique_contract_number() -> str:
    for _ in range(MAX_CONTRACT_NUMBER_ATTEMPTS):
        contract_number = generate_contract_number()
        if not Order.objects.filter(contract_number=contract_number).exists():
            return contract_number
        logger.warning(f"Contract number collision on {contract_number}, regenerating")
    raise RuntimeError("Could not generate a unique contract number")


def create_order(data: dict) -> Order:
    """
    Create an order with a snapshot of the selected package.

    Args:
        data: Validated input with phone_number, message and selected_package
    """
    package_details = get_package_details(data['selected_package'])
    order = Order.objects.create(
        phone_number=data['phone_number'],
        message=data['message'],
        selected_package=data['selected_package'],
        package_details=package_details,
        contract_number=unique_contract_number(),
    )
    logger.info(
        f"Order {order.id} created: package={order.selected_package}, "
        f"contract={order.contract_number}"
    )
    return order
