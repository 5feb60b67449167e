"""Unit tests for entity timestamps."""

from datetime import datetime, timedelta, timezone

from civicsync.domain.model import Issue
from tests.factories import make_issue, make_user


class TestTimestamps:
    """Stored timestamps are timezone-aware UTC."""

    def test_default_timestamps_are_utc(self):
        user = make_user()
        issue = make_issue()

        assert user.created_at.tzinfo is timezone.utc
        assert issue.created_at.tzinfo is timezone.utc

    def test_aware_value_is_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))

        issue = make_issue(created_at=datetime(2024, 1, 10, 12, 0, tzinfo=plus_two))

        assert issue.created_at == datetime(2024, 1, 10, 10, 0, tzinfo=timezone.utc)
        assert issue.created_at.tzinfo is timezone.utc

    def test_naive_value_is_read_as_local_time(self):
        naive = datetime(2024, 1, 10, 9, 30)

        issue = make_issue(created_at=naive)

        assert issue.created_at == naive.astimezone(timezone.utc)
        assert issue.created_at.astimezone().replace(tzinfo=None) == naive

    def test_serialized_with_utc_offset(self):
        issue = make_issue(created_at=datetime(2024, 1, 10, tzinfo=timezone.utc))

        dumped = issue.model_dump(mode="json")

        assert dumped["created_at"] == "2024-01-10T00:00:00Z"
        assert Issue.model_validate(dumped).created_at == issue.created_at
