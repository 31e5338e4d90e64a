"""
Request validation and response shaping for the inquiries API.

Wire names are camelCase; the ``source`` of each field maps to the model's
snake_case attribute so validated_data can be passed straight to the services.
"""
from django.conf import settings
from rest_framework import serializers

from inquiries.models import (
    ORDER_PHONE_NUMBER_PATTERN,
    PHONE_NUMBER_PATTERN,
    CallbackRequest,
    Contact,
    Order,
    TrackingService,
)

NAME_PATTERN = r'^[a-zA-Z\s]+$'

# Keeps page * limit well inside a database integer OFFSET
MAX_PAGE = 100_000


def _name_field(**kwargs):
    return serializers.RegexField(
        NAME_PATTERN,
        min_length=2,
        max_length=100,
        error_messages={
            'invalid': 'Name should only contain letters and spaces',
            'min_length': 'Name must be between 2 and 100 characters',
            'max_length': 'Name must be between 2 and 100 characters',
        },
        **kwargs,
    )


def _phone_field(pattern=PHONE_NUMBER_PATTERN, message='Please enter a valid phone number', **kwargs):
    return serializers.RegexField(pattern, error_messages={'invalid': message}, **kwargs)


class CallbackRequestCreateSerializer(serializers.Serializer):
    name = _name_field()
    phoneNumber = _phone_field(source='phone_number')
    selectedService = serializers.ChoiceField(
        choices=TrackingService.choices,
        source='selected_service',
        error_messages={'invalid_choice': 'Please select a valid service'},
    )
    message = serializers.CharField(
        required=False,
        allow_blank=True,
        max_length=1000,
        error_messages={'max_length': 'Message cannot exceed 1000 characters'},
    )


class CallbackRequestUpdateSerializer(serializers.Serializer):
    """Only the allow-listed fields are declared; anything else is ignored."""

    status = serializers.ChoiceField(choices=CallbackRequest.Status.choices, required=False)
    priority = serializers.ChoiceField(choices=CallbackRequest.Priority.choices, required=False)
    assignedTo = serializers.CharField(
        source='assigned_to', required=False, allow_null=True, allow_blank=True, max_length=100,
    )
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=2000)
    preferredCallTime = serializers.CharField(
        source='preferred_call_time', required=False, allow_null=True, allow_blank=True, max_length=100,
    )


class PageQuerySerializer(serializers.Serializer):
    """page/limit query parameters shared by the paginated list endpoints."""

    page = serializers.IntegerField(min_value=1, max_value=MAX_PAGE, required=False, default=1)
    limit = serializers.IntegerField(min_value=1, required=False)

    def validate_limit(self, value):
        max_page_size = getattr(settings, 'MAX_PAGE_SIZE', 100)
        if value > max_page_size:
            raise serializers.ValidationError(f'Limit must be between 1 and {max_page_size}')
        return value

    def validate(self, attrs):
        attrs.setdefault('limit', getattr(settings, 'DEFAULT_PAGE_SIZE', 10))
        return attrs


class CallbackRequestQuerySerializer(PageQuerySerializer):
    status = serializers.ChoiceField(choices=CallbackRequest.Status.choices, required=False)
    priority = serializers.ChoiceField(choices=CallbackRequest.Priority.choices, required=False)
    service = serializers.ChoiceField(choices=TrackingService.choices, required=False)
    assignedTo = serializers.CharField(source='assigned_to', required=False)
    fromDate = serializers.DateTimeField(source='from_date', required=False)
    toDate = serializers.DateTimeField(source='to_date', required=False)


class CallbackRequestSerializer(serializers.ModelSerializer):
    phoneNumber = serializers.CharField(source='phone_number')
    formattedPhone = serializers.CharField(source='formatted_phone')
    selectedService = serializers.CharField(source='selected_service')
    preferredCallTime = serializers.CharField(source='preferred_call_time')
    callAttempts = serializers.IntegerField(source='call_attempts')
    lastCallAttempt = serializers.DateTimeField(source='last_call_attempt')
    assignedTo = serializers.CharField(source='assigned_to')
    createdAt = serializers.DateTimeField(source='created_at')
    updatedAt = serializers.DateTimeField(source='updated_at')

    class Meta:
        model = CallbackRequest
        fields = [
            'id', 'name', 'phoneNumber', 'formattedPhone', 'selectedService', 'message',
            'status', 'priority', 'preferredCallTime', 'callAttempts', 'lastCallAttempt',
            'assignedTo', 'notes', 'createdAt', 'updatedAt',
        ]
        read_only_fields = fields


class ContactCreateSerializer(serializers.Serializer):
    fullName = _name_field(source='full_name')
    phoneNumber = _phone_field(source='phone_number')
    selectedPlan = serializers.ChoiceField(
        choices=TrackingService.choices,
        source='selected_plan',
        error_messages={'invalid_choice': 'Please select a valid plan'},
    )
    message = serializers.CharField(
        required=False,
        allow_blank=True,
        max_length=1000,
        error_messages={'max_length': 'Message cannot exceed 1000 characters'},
    )


class ContactSerializer(serializers.ModelSerializer):
    fullName = serializers.CharField(source='full_name')
    phoneNumber = serializers.CharField(source='phone_number')
    selectedPlan = serializers.CharField(source='selected_plan')
    createdAt = serializers.DateTimeField(source='created_at')
    updatedAt = serializers.DateTimeField(source='updated_at')

    class Meta:
        model = Contact
        fields = ['id', 'fullName', 'phoneNumber', 'selectedPlan', 'message', 'createdAt', 'updatedAt']
        read_only_fields = fields


class ContactQuerySerializer(PageQuerySerializer):
    pass


class OrderCreateSerializer(serializers.Serializer):
    phoneNumber = _phone_field(
        pattern=ORDER_PHONE_NUMBER_PATTERN,
        message='Please enter a valid Pakistani phone number',
        source='phone_number',
    )
    message = serializers.CharField(
        max_length=500,
        error_messages={
            'max_length': 'Message cannot exceed 500 characters',
            'required': 'Message is required',
        },
    )
    selectedPackage = serializers.ChoiceField(
        choices=Order.Package.choices,
        source='selected_package',
        error_messages={
            'invalid_choice': 'Package must be basic, standard, or premium',
            'required': 'Package selection is required',
        },
    )


class OrderSerializer(serializers.ModelSerializer):
    phoneNumber = serializers.CharField(source='phone_number')
    selectedPackage = serializers.CharField(source='selected_package')
    packageDetails = serializers.JSONField(source='package_details')
    orderDate = serializers.DateTimeField(source='order_date')
    contractNumber = serializers.CharField(source='contract_number')

    class Meta:
        model = Order
        fields = [
            'id', 'phoneNumber', 'message', 'selectedPackage', 'packageDetails',
            'orderDate', 'status', 'contractNumber',
        ]
        read_only_fields = fields
