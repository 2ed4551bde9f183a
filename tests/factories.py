"""
Test data builders shared across unit and integration tests
"""

from datetime import datetime, timezone

from profilehub.modules.user_management.domain.models.user import MembershipType, User
from profilehub.modules.user_management.infrastructure.analytics import InMemoryAnalyticsService


def make_user(**overrides) -> User:
    """
    Build a valid User with sensible defaults.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        User entity
    """
    data = {
        "id": "1",
        "email": "ana.souza@example.com",
        "name": "Ana Souza",
        "membership_type": MembershipType.FREE,
        "purchase_count": 0,
        "total_spent": 0.0,
        "created_at": datetime(2023, 3, 15, 12, 0, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return User(**data)


class FailingAnalyticsService(InMemoryAnalyticsService):
    """Analytics sink whose track() always raises"""

    def track(self, event, properties):
        raise RuntimeError("analytics backend unavailable")
