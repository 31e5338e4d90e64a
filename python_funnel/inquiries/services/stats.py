"""
Dashboard statistics for callback requests.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional

from django.utils import timezone

from inquiries.models import CallbackRequest
from inquiries.services.query import count_by

logger = logging.getLogger(__name__)


def period_starts(now: datetime) -> dict:
    """
    Start of each reporting period relative to now.

    today: local midnight
    this_week: trailing 7 days
    this_month: local midnight on the first day of the month
    """
    local_now = timezone.localtime(now)
    start_of_day = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    return {
        'today': start_of_day,
        'this_week': now - timedelta(days=7),
        'this_month': start_of_day.replace(day=1),
    }


def callback_statistics(now: Optional[datetime] = None) -> dict:
    """
    Compute callback request counts for the dashboard.

    Returns:
        Dict with today, thisWeek and thisMonth (counts by status) and
        byService and byPriority (all-time counts). Categories with no
        records are omitted rather than reported as zero.
    """
    now = now or timezone.now()
    starts = period_starts(now)
    requests = CallbackRequest.objects.all()

    stats = {
        'today': count_by(requests.filter(created_at__gte=starts['today']), 'status'),
        'thisWeek': count_by(requests.filter(created_at__gte=starts['this_week']), 'status'),
        'thisMonth': count_by(requests.filter(created_at__gte=starts['this_month']), 'status'),
        'byService': count_by(requests, 'selected_service'),
        'byPriority': count_by(requests, 'priority'),
    }
    logger.debug(f"Callback statistics computed: {stats}")
    return stats
