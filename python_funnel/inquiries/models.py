"""
Data models for the tracking funnel service.
"""
from django.core.validators import MaxLengthValidator, MinValueValidator, RegexValidator
from django.db import models
from django.utils import timezone


PHONE_NUMBER_PATTERN = r'^\+?[1-9][0-9]{0,15}$'
ORDER_PHONE_NUMBER_PATTERN = r'^(\+92|0)?[0-9]{10,11}$'


class TrackingService(models.TextChoices):
    CAR_TRACKING = 'Car Tracking', 'Car Tracking'
    BIKE_TRACKING = 'Bike Tracking', 'Bike Tracking'
    FLEET_MANAGEMENT = 'Fleet Management', 'Fleet Management'


class CallbackRequest(models.Model):
    """
    A customer's request to be called back by the sales team.

    Priority is derived at creation time; status, priority, assignment,
    notes and preferred call time are managed by administrators afterwards.
    """

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        CALLED = 'called', 'Called'
        COMPLETED = 'completed', 'Completed'
        CANCELLED = 'cancelled', 'Cancelled'

    class Priority(models.TextChoices):
        LOW = 'low', 'Low'
        MEDIUM = 'medium', 'Medium'
        HIGH = 'high', 'High'

    name = models.CharField(max_length=100)
    phone_number = models.CharField(
        max_length=17,
        validators=[RegexValidator(PHONE_NUMBER_PATTERN, 'Please enter a valid phone number')],
        db_index=True,
    )
    selected_service = models.CharField(max_length=20, choices=TrackingService.choices, db_index=True)
    message = models.TextField(blank=True, default='', validators=[MaxLengthValidator(1000)])
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.PENDING,
    )
    priority = models.CharField(
        max_length=10,
        choices=Priority.choices,
        default=Priority.MEDIUM,
    )
    preferred_call_time = models.CharField(max_length=100, null=True, blank=True)
    call_attempts = models.PositiveIntegerField(default=0, validators=[MinValueValidator(0)])
    last_call_attempt = models.DateTimeField(null=True, blank=True)
    assigned_to = models.CharField(max_length=100, null=True, blank=True)
    notes = models.TextField(null=True, blank=True, validators=[MaxLengthValidator(2000)])
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', '-created_at'], name='callback_status_created_idx'),
            models.Index(fields=['priority', 'status'], name='callback_priority_status_idx'),
            models.Index(fields=['assigned_to', 'status'], name='callback_assignee_status_idx'),
        ]

    def __str__(self):
        return f"Callback {self.id} - {self.name} ({self.status})"

    @property
    def formatted_phone(self) -> str:
        if self.phone_number.startswith('+'):
            return self.phone_number
        return f"+{self.phone_number}"


class Contact(models.Model):
    """A contact-form inquiry about one of the tracking plans."""

    full_name = models.CharField(max_length=100)
    phone_number = models.CharField(
        max_length=17,
        validators=[RegexValidator(PHONE_NUMBER_PATTERN, 'Please enter a valid phone number')],
    )
    selected_plan = models.CharField(max_length=20, choices=TrackingService.choices, db_index=True)
    message = models.TextField(blank=True, default='', validators=[MaxLengthValidator(1000)])
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Contact {self.id} - {self.full_name} ({self.selected_plan})"


class Order(models.Model):
    """
    A paid-package order.

    ``package_details`` is a snapshot of the catalog entry taken at order time,
    so later price or feature changes do not rewrite existing contracts.
    """

    class Package(models.TextChoices):
        BASIC = 'basic', 'Basic'
        STANDARD = 'standard', 'Standard'
        PREMIUM = 'premium', 'Premium'

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        CONFIRMED = 'confirmed', 'Confirmed'
        CANCELLED = 'cancelled', 'Cancelled'

    phone_number = models.CharField(
        max_length=14,
        validators=[RegexValidator(ORDER_PHONE_NUMBER_PATTERN, 'Please enter a valid Pakistani phone number')],
    )
    message = models.TextField(validators=[MaxLengthValidator(500)])
    selected_package = models.CharField(max_length=10, choices=Package.choices)
    package_details = models.JSONField()
    order_date = models.DateTimeField(default=timezone.now, db_index=True)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING)
    contract_number = models.CharField(max_length=32, unique=True)

    class Meta:
        ordering = ['-order_date']

    def __str__(self):
        return f"Order {self.contract_number} - {self.selected_package} ({self.status})"
