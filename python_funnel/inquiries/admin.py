"""
Django admin configuration for inquiries app.
"""
from django.contrib import admin
from inquiries.models import CallbackRequest, Contact, Order
from inquiries.services.lifecycle import ALLOWED_UPDATE_FIELDS, update_callback_request


@admin.register(CallbackRequest)
class CallbackRequestAdmin(admin.ModelAdmin):
    """Admin interface for CallbackRequest model."""

    list_display = ('id', 'name', 'phone_number', 'selected_service', 'priority', 'status',
                    'call_attempts', 'assigned_to', 'created_at')
    list_filter = ('status', 'priority', 'selected_service', 'created_at')
    search_fields = ('name', 'phone_number', 'assigned_to')
    readonly_fields = ('id', 'name', 'phone_number', 'selected_service', 'message',
                       'call_attempts', 'last_call_attempt', 'created_at', 'updated_at')

    fieldsets = (
        ('Customer', {
            'fields': ('id', 'name', 'phone_number', 'selected_service', 'message')
        }),
        ('Triage', {
            'fields': ('status', 'priority', 'assigned_to', 'preferred_call_time', 'notes')
        }),
        ('Call Attempts', {
            'fields': ('call_attempts', 'last_call_attempt')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        """Callback requests only come in through the public form."""
        return False

    def save_model(self, request, obj, form, change):
        """
        Apply admin edits through the lifecycle service so that marking a
        request as called counts the attempt, same as the API.
        """
        patch = {
            field: form.cleaned_data[field]
            for field in form.changed_data
            if field in ALLOWED_UPDATE_FIELDS
        }
        if not patch:
            return

        updated = update_callback_request(obj.pk, patch)
        obj.call_attempts = updated.call_attempts
        obj.last_call_attempt = updated.last_call_attempt
        obj.updated_at = updated.updated_at


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    """Admin interface for Contact model."""

    list_display = ('id', 'full_name', 'phone_number', 'selected_plan', 'created_at')
    list_filter = ('selected_plan', 'created_at')
    search_fields = ('full_name', 'phone_number')
    readonly_fields = ('id', 'full_name', 'phone_number', 'selected_plan', 'message',
                       'created_at', 'updated_at')

    def has_add_permission(self, request):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin interface for Order model."""

    list_display = ('id', 'contract_number', 'selected_package', 'phone_number', 'status', 'order_date')
    list_filter = ('status', 'selected_package', 'order_date')
    search_fields = ('contract_number', 'phone_number')
    readonly_fields = ('id', 'contract_number', 'phone_number', 'message', 'selected_package',
                       'package_details', 'order_date')

    fieldsets = (
        ('Order', {
            'fields': ('id', 'contract_number', 'status', 'order_date')
        }),
        ('Package', {
            'fields': ('selected_package', 'package_details'),
        }),
        ('Customer', {
            'fields': ('phone_number', 'message')
        }),
    )

    def has_add_permission(self, request):
        """Orders are only placed through the API."""
        return False
