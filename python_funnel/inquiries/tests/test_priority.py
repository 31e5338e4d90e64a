"""
Unit and property-based tests for priority classification.
"""
import pytest
from hypothesis import given, settings
import hypothesis.strategies as st

from inquiries.models import CallbackRequest, TrackingService
from inquiries.services.priority import (
    PRIORITY_RANK,
    classify_priority,
    estimated_call_time,
)

Priority = CallbackRequest.Priority


class TestClassifyPriority:
    """Tests for classify_priority."""

    def test_fleet_management_is_high(self):
        assert classify_priority(TrackingService.FLEET_MANAGEMENT, None) == Priority.HIGH

    def test_asap_message_is_high(self):
        assert classify_priority(TrackingService.CAR_TRACKING, 'please call ASAP') == Priority.HIGH

    def test_urgent_message_is_high(self):
        assert classify_priority(TrackingService.BIKE_TRACKING, 'This is URGENT!') == Priority.HIGH

    def test_keyword_inside_word_matches(self):
        """Substring match: 'urgently' still contains 'urgent'."""
        assert classify_priority(TrackingService.CAR_TRACKING, 'need it urgently') == Priority.HIGH

    def test_plain_message_is_medium(self):
        assert classify_priority(TrackingService.CAR_TRACKING, 'just checking in') == Priority.MEDIUM

    @pytest.mark.parametrize('message', [None, ''])
    def test_missing_message_is_medium(self, message):
        assert classify_priority(TrackingService.CAR_TRACKING, message) == Priority.MEDIUM

    def test_classifier_never_returns_low(self):
        for service in TrackingService.values:
            for message in (None, '', 'hello', 'asap'):
                assert classify_priority(service, message) != Priority.LOW


class TestClassifyPriorityProperties:
    """Property-based tests for classify_priority."""

    @settings(max_examples=100)
    @given(message=st.one_of(st.none(), st.text(max_size=200)))
    def test_fleet_management_always_high(self, message):
        """Fleet Management is HIGH regardless of message content."""
        assert classify_priority(TrackingService.FLEET_MANAGEMENT, message) == Priority.HIGH

    @settings(max_examples=100)
    @given(
        prefix=st.text(max_size=50),
        suffix=st.text(max_size=50),
        keyword=st.sampled_from(['urgent', 'URGENT', 'Urgent', 'asap', 'ASAP', 'AsAp']),
    )
    def test_trigger_words_case_insensitive(self, prefix, suffix, keyword):
        message = f"{prefix}{keyword}{suffix}"
        assert classify_priority(TrackingService.CAR_TRACKING, message) == Priority.HIGH

    @settings(max_examples=100)
    @given(message=st.text(alphabet='bcdefghijklmnopqrtvwxyz ', max_size=200))
    def test_messages_without_trigger_letters_are_medium(self, message):
        """Without 'u' or 's' neither keyword can appear."""
        assert classify_priority(TrackingService.BIKE_TRACKING, message) == Priority.MEDIUM


class TestEstimatedCallTime:
    """Tests for estimated_call_time."""

    @pytest.mark.parametrize('priority, expected', [
        (Priority.HIGH, 'Within 2 hours'),
        (Priority.MEDIUM, 'Within 24 hours'),
        (Priority.LOW, 'Within 48 hours'),
        ('unknown', 'Within 24 hours'),
        (None, 'Within 24 hours'),
    ])
    def test_estimates(self, priority, expected):
        assert estimated_call_time(priority) == expected


class TestPriorityRank:
    def test_total_order(self):
        assert PRIORITY_RANK[Priority.HIGH] > PRIORITY_RANK[Priority.MEDIUM] > PRIORITY_RANK[Priority.LOW]

    def test_every_priority_ranked(self):
        assert set(PRIORITY_RANK) == set(Priority.values)
