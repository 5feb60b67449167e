"""Sample data loaded into the in-memory store at startup.

Sample users both log in with ``password123``. Seeded issues carry their own
vote counters, which are larger than the handful of seeded vote rows.
"""

from datetime import datetime, timezone
from uuid import UUID

from civicsync.config import AuthSettings
from civicsync.domain.model import Issue, User, Vote
from civicsync.domain.value import (
    IssueCategory,
    IssueId,
    IssueStatus,
    UserId,
    VoteId,
    utc_now,
)
from civicsync.util.password import hash_password

SAMPLE_PASSWORD = "password123"

JOHN_ID = UserId(UUID("00000000-0000-4000-8000-000000000001"))
JANE_ID = UserId(UUID("00000000-0000-4000-8000-000000000002"))

POTHOLE_ID = IssueId(UUID("00000000-0000-4000-9000-000000000001"))
STREET_LIGHT_ID = IssueId(UUID("00000000-0000-4000-9000-000000000002"))
WATER_LEAK_ID = IssueId(UUID("00000000-0000-4000-9000-000000000003"))
GARBAGE_ID = IssueId(UUID("00000000-0000-4000-9000-000000000004"))


def _utc_day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def sample_users(auth_settings: AuthSettings) -> list[User]:
    """Build the sample users with freshly hashed passwords."""
    password_hash = hash_password(SAMPLE_PASSWORD, auth_settings)
    return [
        User(
            id=JOHN_ID,
            email="john@example.com",
            name="John Doe",
            password_hash=password_hash,
            created_at=_utc_day(2024, 1, 1),
        ),
        User(
            id=JANE_ID,
            email="jane@example.com",
            name="Jane Smith",
            password_hash=password_hash,
            created_at=_utc_day(2024, 1, 2),
        ),
    ]


def sample_issues() -> list[Issue]:
    """Build the sample issues; the last one is created 'now'."""
    now = utc_now()
    return [
        Issue(
            id=POTHOLE_ID,
            user_id=JOHN_ID,
            title="Huge pothole on Main Street",
            description=(
                "There is a dangerous pothole on Main Street near the intersection "
                "with 5th Avenue. It's about 2 feet wide and causing damage to vehicles."
            ),
            category=IssueCategory.ROAD,
            location="Main Street & 5th Avenue, Sector 15",
            latitude=30.7333,
            longitude=76.7794,
            status=IssueStatus.IN_PROGRESS,
            vote_count=15,
            created_at=_utc_day(2024, 1, 10),
            updated_at=_utc_day(2024, 1, 15),
        ),
        Issue(
            id=STREET_LIGHT_ID,
            user_id=JANE_ID,
            title="Street light not working",
            description=(
                "The street light outside house #45 has been broken for 2 weeks. "
                "The area is very dark at night and poses a safety risk."
            ),
            category=IssueCategory.ELECTRICITY,
            location="House #45, Block C, Sector 22",
            latitude=30.7283,
            longitude=76.7744,
            status=IssueStatus.PENDING,
            vote_count=8,
            created_at=_utc_day(2024, 1, 12),
            updated_at=_utc_day(2024, 1, 12),
        ),
        Issue(
            id=WATER_LEAK_ID,
            user_id=JOHN_ID,
            title="Water leakage from main pipeline",
            description=(
                "Major water leakage from the main pipeline causing waterlogging "
                "and water wastage. Immediate attention required."
            ),
            category=IssueCategory.WATER,
            location="Near Park, Sector 18",
            latitude=30.7383,
            longitude=76.7844,
            status=IssueStatus.RESOLVED,
            vote_count=25,
            created_at=_utc_day(2024, 1, 5),
            updated_at=_utc_day(2024, 1, 20),
        ),
        Issue(
            id=GARBAGE_ID,
            user_id=JANE_ID,
            title="Garbage not collected for a week",
            description=(
                "The garbage collection truck has not visited our area for over a "
                "week. The garbage bins are overflowing and creating unhygienic "
                "conditions."
            ),
            category=IssueCategory.SANITATION,
            location="Block A, Sector 19",
            latitude=30.7433,
            longitude=76.7894,
            status=IssueStatus.PENDING,
            vote_count=20,
            created_at=now,
            updated_at=now,
        ),
    ]


def sample_votes() -> list[Vote]:
    """Build the sample votes."""
    return [
        Vote(
            id=VoteId(UUID("00000000-0000-4000-a000-000000000001")),
            user_id=JOHN_ID,
            issue_id=STREET_LIGHT_ID,
            created_at=_utc_day(2024, 1, 13),
        ),
        Vote(
            id=VoteId(UUID("00000000-0000-4000-a000-000000000002")),
            user_id=JOHN_ID,
            issue_id=GARBAGE_ID,
            created_at=_utc_day(2024, 1, 14),
        ),
        Vote(
            id=VoteId(UUID("00000000-0000-4000-a000-000000000003")),
            user_id=JANE_ID,
            issue_id=POTHOLE_ID,
            created_at=_utc_day(2024, 1, 11),
        ),
        Vote(
            id=VoteId(UUID("00000000-0000-4000-a000-000000000004")),
            user_id=JANE_ID,
            issue_id=WATER_LEAK_ID,
            created_at=_utc_day(2024, 1, 6),
        ),
    ]
