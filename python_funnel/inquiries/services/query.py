"""
Filtered, paginated retrieval of callback requests for the admin dashboard.
"""
import logging
import math

from django.db.models import Case, Count, IntegerField, QuerySet, Value, When

from inquiries.models import CallbackRequest
from inquiries.services.priority import PRIORITY_RANK

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def build_filter(criteria: dict) -> dict:
    """
    Translate optional criteria into ORM lookups.

    Supported keys: status, priority, service, assigned_to, from_date, to_date.
    Missing or empty criteria are not applied. Date bounds are inclusive.
    """
    lookups = {}
    if criteria.get('status'):
        lookups['status'] = criteria['status']
    if criteria.get('priority'):
        lookups['priority'] = criteria['priority']
    if criteria.get('service'):
        lookups['selected_service'] = criteria['service']
    if criteria.get('assigned_to'):
        lookups['assigned_to'] = criteria['assigned_to']
    if criteria.get('from_date'):
        lookups['created_at__gte'] = criteria['from_date']
    if criteria.get('to_date'):
        lookups['created_at__lte'] = criteria['to_date']
    return lookups


def with_priority_rank(queryset: QuerySet) -> QuerySet:
    """Annotate priority_rank so HIGH > MEDIUM > LOW sorts numerically."""
    return queryset.annotate(
        priority_rank=Case(
            *[When(priority=priority, then=Value(rank)) for priority, rank in PRIORITY_RANK.items()],
            default=Value(0),
            output_field=IntegerField(),
        )
    )


def count_by(queryset: QuerySet, field: str) -> dict:
    """
    Group a queryset by one field and count rows per value.

    Values with no rows do not appear in the result.
    """
    rows = queryset.order_by().values(field).annotate(count=Count('id'))
    return {row[field]: row['count'] for row in rows}


def paginate(total: int, page: int, limit: int) -> dict:
    total_pages = math.ceil(total / limit)
    return {
        'currentPage': page,
        'totalPages': total_pages,
        'totalRequests': total,
        'hasNext': page < total_pages,
        'hasPrev': page > 1,
    }


def list_callback_requests(criteria: dict, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> dict:
    """
    Return one page of callback requests plus a status breakdown.

    Results are ordered by priority (high first), then newest first. The
    status counts cover the whole filtered set, not just the returned page.

    Args:
        criteria: Optional filters (see build_filter)
        page: 1-indexed page number
        limit: Page size

    Returns:
        Dict with requests (list of CallbackRequest), pagination and status_counts
    """
    lookups = build_filter(criteria)
    filtered = CallbackRequest.objects.filter(**lookups)

    offset = (page - 1) * limit
    requests = list(
        with_priority_rank(filtered).order_by('-priority_rank', '-created_at', '-id')[offset:offset + limit]
    )
    total = filtered.count()
    status_counts = count_by(filtered, 'status')

    logger.debug(
        f"Listed callback requests with filter {lookups}: "
        f"page={page}, limit={limit}, total={total}"
    )
    return {
        'requests': requests,
        'pagination': paginate(total, page, limit),
        'status_counts': status_counts,
    }
