"""
Tests for callback dashboard statistics.
"""
from datetime import datetime, timedelta

import pytest
from django.utils import timezone

from inquiries.models import CallbackRequest
from inquiries.services.stats import callback_statistics, period_starts

Status = CallbackRequest.Status


class TestPeriodStarts:
    def test_boundaries(self):
        now = timezone.make_aware(datetime(2024, 3, 15, 14, 30))

        starts = period_starts(now)

        assert starts['today'] == timezone.make_aware(datetime(2024, 3, 15))
        assert starts['this_week'] == timezone.make_aware(datetime(2024, 3, 8, 14, 30))
        assert starts['this_month'] == timezone.make_aware(datetime(2024, 3, 1))


@pytest.mark.django_db
class TestCallbackStatistics:
    """Tests for callback_statistics."""

    def test_empty_database_gives_empty_groupings(self):
        assert callback_statistics() == {
            'today': {},
            'thisWeek': {},
            'thisMonth': {},
            'byService': {},
            'byPriority': {},
        }

    def test_time_windows(self, make_callback):
        now = timezone.now()
        starts = period_starts(now)

        make_callback(status=Status.PENDING, created_at=now)
        make_callback(status=Status.CALLED, created_at=starts['today'] - timedelta(seconds=1))
        make_callback(status=Status.COMPLETED, created_at=now - timedelta(days=8))
        make_callback(
            status=Status.CANCELLED,
            created_at=min(starts['this_month'] - timedelta(days=1), now - timedelta(days=8)),
        )

        stats = callback_statistics(now=now)

        assert stats['today'] == {'pending': 1}
        assert stats['thisWeek'] == {'pending': 1, 'called': 1}
        assert 'cancelled' not in stats['thisMonth']
        assert stats['thisMonth']['pending'] == 1

    def test_all_time_groupings(self, make_callback):
        old = timezone.now() - timedelta(days=400)
        make_callback(selected_service='Car Tracking', priority='medium', created_at=old)
        make_callback(selected_service='Car Tracking', priority='high')
        make_callback(selected_service='Fleet Management', priority='high')

        stats = callback_statistics()

        assert stats['byService'] == {'Car Tracking': 2, 'Fleet Management': 1}
        assert stats['byPriority'] == {'medium': 1, 'high': 2}

    def test_zero_categories_absent(self, make_callback):
        make_callback(status=Status.PENDING, priority='medium')

        stats = callback_statistics()

        assert 'completed' not in stats['today']
        assert 'low' not in stats['byPriority']
        assert 'Bike Tracking' not in stats['byService']
        assert all(count > 0 for grouping in stats.values() for count in grouping.values())
