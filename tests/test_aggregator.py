"""
Tests for availability aggregation.
"""

from meetroom.domain.aggregator import AvailabilityAggregator
from meetroom.domain.models import UserAvailability


def _user(name: str, *slots: str) -> UserAvailability:
    return UserAvailability(room_code="ROOM01", name=name, enable_times=list(slots))


class TestDateOnlyAggregation:
    """Tests for rooms where participants pick whole days."""

    def test_counts_per_date(self):
        """Dates are counted across users without de-duplication."""
        aggregator = AvailabilityAggregator()
        submissions = [
            _user("alice", "2024-01-01", "2024-01-01"),
            _user("bob", "2024-01-02"),
        ]

        result = aggregator.aggregate(True, submissions)

        assert result.enable_times == {"2024-01-01": 2, "2024-01-02": 1}

    def test_keys_are_sorted(self):
        """Histogram keys follow the sorted slot order."""
        aggregator = AvailabilityAggregator()
        submissions = [
            _user("alice", "2024-01-03", "2024-01-01"),
            _user("bob", "2024-01-02", "2024-01-01"),
        ]

        result = aggregator.aggregate(True, submissions)

        assert list(result.enable_times) == ["2024-01-01", "2024-01-02", "2024-01-03"]
        assert result.enable_times["2024-01-01"] == 2

    def test_user_without_slots(self):
        """An empty submission contributes nothing."""
        aggregator = AvailabilityAggregator()

        result = aggregator.aggregate(True, [_user("alice"), _user("bob", "2024-01-05")])

        assert result.enable_times == {"2024-01-05": 1}


class TestTimedAggregation:
    """Tests for rooms where participants pick date and time slots."""

    def test_same_user_same_date_counts_once(self):
        """Several times on one date count once for that user."""
        aggregator = AvailabilityAggregator()

        result = aggregator.aggregate(
            False, [_user("alice", "2024-01-01 09:00", "2024-01-01 10:00")]
        )

        assert result.enable_times == {"2024-01-01": 1}

    def test_two_users_same_date(self):
        """Two users on one date count twice."""
        aggregator = AvailabilityAggregator()
        submissions = [
            _user("alice", "2024-01-01 09:00", "2024-01-01 10:00"),
            _user("bob", "2024-01-01 09:00", "2024-01-01 10:00"),
        ]

        result = aggregator.aggregate(False, submissions)

        assert result.enable_times == {"2024-01-01": 2}

    def test_collapses_to_date_granularity(self):
        """Keys are bare dates, not date+time slots."""
        aggregator = AvailabilityAggregator()
        submissions = [
            _user("alice", "2024-01-02 09:00", "2024-01-01 13:00", "2024-01-02 18:30"),
            _user("bob", "2024-01-01 08:00"),
        ]

        result = aggregator.aggregate(False, submissions)

        assert result.enable_times == {"2024-01-01": 2, "2024-01-02": 1}
        assert list(result.enable_times) == ["2024-01-01", "2024-01-02"]


class TestAggregationProperties:
    """Tests for properties shared by both modes."""

    def test_no_submissions(self):
        """No participants yields an empty histogram."""
        aggregator = AvailabilityAggregator()

        assert aggregator.aggregate(True, []).enable_times == {}
        assert aggregator.aggregate(False, []).enable_times == {}

    def test_independent_of_submission_order(self):
        """Reordering participants gives the same histogram."""
        aggregator = AvailabilityAggregator()
        alice = _user("alice", "2024-01-03 09:00", "2024-01-01 09:00")
        bob = _user("bob", "2024-01-01 11:00")

        forward = aggregator.aggregate(False, [alice, bob])
        backward = aggregator.aggregate(False, [bob, alice])

        assert forward == backward
        assert list(forward.enable_times) == list(backward.enable_times)

    def test_most_popular(self):
        """The best dates are the ones with the highest count."""
        aggregator = AvailabilityAggregator()
        submissions = [
            _user("alice", "2024-01-01", "2024-01-02"),
            _user("bob", "2024-01-02", "2024-01-03"),
            _user("carol", "2024-01-03"),
        ]

        result = aggregator.aggregate(True, submissions)

        assert result.most_popular() == ["2024-01-02", "2024-01-03"]
        assert aggregator.aggregate(True, []).most_popular() == []
