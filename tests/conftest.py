"""
Shared test fixtures for ProfileHub tests
"""

import pytest

from profilehub.bootstrap import build_user_management
from profilehub.modules.user_management.domain.models.user import MembershipType
from profilehub.modules.user_management.infrastructure.analytics import InMemoryAnalyticsService
from profilehub.modules.user_management.infrastructure.repositories import InMemoryUserRepository
from profilehub.shared.config.settings import Settings

from tests.factories import make_user


@pytest.fixture
def free_user():
    """Free member far from premium eligibility (3 purchases, $10 spent)"""
    return make_user(id="1", email="free@example.com", name="Bruno Silva",
                     purchase_count=3, total_spent=10.0)


@pytest.fixture
def eligible_user():
    """Free member eligible through purchase count"""
    return make_user(id="2", email="eligible@example.com", name="Camila García",
                     purchase_count=12, total_spent=300.0)


@pytest.fixture
def premium_user():
    """Premium member with both discount bonuses"""
    return make_user(id="3", email="premium@example.com", name="Diego Martínez",
                     membership_type=MembershipType.PREMIUM, purchase_count=60, total_spent=1200.0)


@pytest.fixture
def spender_user():
    """Free member eligible through total spend only"""
    return make_user(id="4", email="spender@example.com", name="Elena Costa",
                     purchase_count=2, total_spent=750.0)


@pytest.fixture
def users(free_user, eligible_user, premium_user, spender_user):
    return [free_user, eligible_user, premium_user, spender_user]


@pytest.fixture
def repository(users):
    """In-memory repository holding the sample users"""
    return InMemoryUserRepository(users=users)


@pytest.fixture
def analytics():
    """Recording analytics sink"""
    return InMemoryAnalyticsService()


@pytest.fixture
def test_settings():
    """Settings for tests, independent of the environment"""
    return Settings(
        ENVIRONMENT="test",
        LOG_LEVEL="WARNING",
        LOG_FORMAT="text",
        ANALYTICS_BACKEND="memory",
        SEED_DEMO_USERS=False,
    )


@pytest.fixture
def services(test_settings, repository, analytics):
    """Composed user management module over the sample data"""
    return build_user_management(settings=test_settings, repository=repository, analytics=analytics)
