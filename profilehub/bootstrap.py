# 📄 File: profilehub/bootstrap.py
#
# 🧭 Purpose (Layman Explanation):
# Plugs the pieces together: picks where users are stored and where activity is reported,
# then hands both to every user operation
#
# 🧪 Purpose (Technical Summary):
# Composition root. Builds the repository and analytics collaborators from settings
# (or accepts overrides) and constructs the four use cases with constructor injection
#
# 🔗 Dependencies:
# - profilehub.shared.config.settings
# - user_management application use cases and infrastructure adapters
#
# 🔄 Connected Modules / Calls From:
# - profilehub.main (application factory)
# - API and use case tests

from dataclasses import dataclass
from typing import Optional

from profilehub.modules.user_management.application.services.analytics_service import AnalyticsService
from profilehub.modules.user_management.application.use_cases import (
    GetUserProfile,
    ListUsers,
    UpdateUserProfile,
    UpgradeMembership,
)
from profilehub.modules.user_management.domain.repositories.user_repository import UserRepository
from profilehub.modules.user_management.infrastructure.analytics import create_analytics_service
from profilehub.modules.user_management.infrastructure.repositories import InMemoryUserRepository
from profilehub.shared.config.settings import Settings, get_settings
from profilehub.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class UserManagementServices:
    """Composed user management collaborators and use cases."""
    user_repository: UserRepository
    analytics_service: AnalyticsService
    get_user_profile: GetUserProfile
    list_users: ListUsers
    update_user_profile: UpdateUserProfile
    upgrade_membership: UpgradeMembership


def build_user_management(
    settings: Optional[Settings] = None,
    repository: Optional[UserRepository] = None,
    analytics: Optional[AnalyticsService] = None,
) -> UserManagementServices:
    """
    Wire the user management module.

    Args:
        settings: Settings to read collaborator choices from
        repository: Repository override, defaults to an in-memory store
        analytics: Analytics sink override, defaults to ANALYTICS_BACKEND

    Returns:
        UserManagementServices
    """
    settings = settings or get_settings()

    if repository is None:
        if settings.SEED_DEMO_USERS:
            repository = InMemoryUserRepository.with_demo_data(
                count=settings.DEMO_USER_COUNT,
                latency_seconds=settings.repository_latency_seconds,
            )
        else:
            repository = InMemoryUserRepository(latency_seconds=settings.repository_latency_seconds)

    if analytics is None:
        analytics = create_analytics_service(settings.ANALYTICS_BACKEND)

    logger.info(
        "User management module composed",
        extra={
            "repository": type(repository).__name__,
            "analytics": type(analytics).__name__,
        }
    )

    return UserManagementServices(
        user_repository=repository,
        analytics_service=analytics,
        get_user_profile=GetUserProfile(repository, analytics),
        list_users=ListUsers(repository, analytics),
        update_user_profile=UpdateUserProfile(repository, analytics),
        upgrade_membership=UpgradeMembership(repository, analytics),
    )
