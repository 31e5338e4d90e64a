"""
URL configuration for inquiries app.
"""
from django.urls import path
from inquiries.views import (
    CallbackRequestDetailView,
    CallbackRequestListCreateView,
    CallbackRequestStatsView,
    ContactDetailView,
    ContactListCreateView,
    ContactsByPlanView,
    OrderDetailView,
    OrderListCreateView,
)

urlpatterns = [
    path('callbacks/', CallbackRequestListCreateView.as_view(), name='callback-list'),
    path('callbacks/stats/', CallbackRequestStatsView.as_view(), name='callback-stats'),
    path('callbacks/<int:pk>/', CallbackRequestDetailView.as_view(), name='callback-detail'),
    path('contacts/', ContactListCreateView.as_view(), name='contact-list'),
    path('contacts/plan/<str:plan>/', ContactsByPlanView.as_view(), name='contact-by-plan'),
    path('contacts/<int:pk>/', ContactDetailView.as_view(), name='contact-detail'),
    path('orders/', OrderListCreateView.as_view(), name='order-list'),
    path('orders/<int:pk>/', OrderDetailView.as_view(), name='order-detail'),
]
