"""
Unit tests for infrastructure adapters

Tests the in-memory repository, demo seed data, the analytics sinks
and the composition function.
"""

import logging

import pytest

from profilehub.bootstrap import build_user_management
from profilehub.modules.user_management.infrastructure.analytics import (
    InMemoryAnalyticsService,
    LoggingAnalyticsService,
    NullAnalyticsService,
    create_analytics_service,
)
from profilehub.modules.user_management.infrastructure.repositories import (
    InMemoryUserRepository,
    build_demo_users,
)
from profilehub.shared.config.settings import Settings
from profilehub.shared.utils.logging import log_context

from tests.factories import make_user


class TestInMemoryUserRepository:
    """Test InMemoryUserRepository behaviour"""

    @pytest.mark.asyncio
    async def test_find_by_id(self, repository, free_user):
        assert await repository.find_by_id(free_user.id) == free_user
        assert await repository.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, repository, premium_user):
        found = await repository.find_by_email("  PREMIUM@example.com ")
        assert found.id == premium_user.id

    @pytest.mark.asyncio
    async def test_save_replaces_by_id(self, repository, free_user):
        await repository.save(free_user.with_changes(name="Bruno Costa"))

        assert (await repository.find_by_id(free_user.id)).name == "Bruno Costa"
        assert len(repository) == 4

    @pytest.mark.asyncio
    async def test_save_inserts_new_user(self):
        repository = InMemoryUserRepository()
        await repository.save(make_user(id="new"))

        assert [u.id for u in await repository.find_all()] == ["new"]

    @pytest.mark.asyncio
    async def test_latency_hook(self):
        repository = InMemoryUserRepository(users=[make_user()], latency_seconds=0.01)
        assert await repository.find_by_id("1") is not None


class TestDemoUsers:
    """Test deterministic demo seed data"""

    def test_count_and_ids(self):
        users = build_demo_users(10)
        assert [u.id for u in users] == [str(i) for i in range(1, 11)]

    def test_same_seed_same_users(self):
        first = build_demo_users(5)
        second = build_demo_users(5)

        assert [(u.name, u.email, u.membership_type, u.purchase_count, u.total_spent) for u in first] == \
            [(u.name, u.email, u.membership_type, u.purchase_count, u.total_spent) for u in second]

    def test_values_within_ranges(self):
        for user in build_demo_users(25):
            assert 0 <= user.purchase_count <= 100
            assert 0 <= user.total_spent <= 5000
            assert user.email.endswith("@example.com")

    def test_emails_are_unique(self):
        users = build_demo_users(25)
        assert len({u.email for u in users}) == 25


class TestAnalyticsSinks:
    """Test analytics sink enrichment and selection"""

    def test_in_memory_sink_enriches_events(self):
        sink = InMemoryAnalyticsService()
        sink.set_global_properties({"app_version": "1.0.0"})
        sink.set_user_id("42")

        sink.track("user_profile_viewed", {"user_id": "7"})

        event = sink.events[0]
        assert event.name == "user_profile_viewed"
        assert event.properties["app_version"] == "1.0.0"
        assert event.properties["user_id"] == "7"
        assert event.properties["analytics_user_id"] == "42"
        assert event.properties["session_id"] == sink.session_id
        assert "timestamp" in event.properties

    def test_global_properties_merge(self):
        sink = InMemoryAnalyticsService()
        sink.set_global_properties({"a": 1})
        sink.set_global_properties({"b": 2})

        assert sink.global_properties == {"a": 1, "b": 2}

    def test_logging_sink_emits_business_event(self, caplog):
        sink = LoggingAnalyticsService()
        caplog.set_level(logging.INFO, logger="profilehub.analytics")

        with log_context(request_id="req-1"):
            sink.set_user_id("42")
            sink.track("membership_upgrade_successful", {"user_id": "7"})

        record = caplog.records[-1]
        assert record.name == "profilehub.analytics"
        assert record.extra_fields["business_event_type"] == "membership_upgrade_successful"
        assert record.extra_fields["entity_id"] == "7"
        assert record.extra_fields["properties"]["analytics_user_id"] == "42"

    def test_null_sink_discards(self):
        sink = NullAnalyticsService()
        sink.set_user_id("1")
        sink.set_global_properties({"x": 1})
        assert sink.track("anything", {}) is None

    @pytest.mark.parametrize("backend,expected", [
        ("logging", LoggingAnalyticsService),
        ("null", NullAnalyticsService),
        ("MEMORY", InMemoryAnalyticsService),
    ])
    def test_factory(self, backend, expected):
        assert isinstance(create_analytics_service(backend), expected)

    def test_factory_rejects_unknown_backend(self):
        with pytest.raises(ValueError):
            create_analytics_service("mixpanel")


class TestComposition:
    """Test build_user_management wiring"""

    def test_defaults_from_settings(self):
        settings = Settings(ENVIRONMENT="test", ANALYTICS_BACKEND="null", SEED_DEMO_USERS=True, DEMO_USER_COUNT=3)

        services = build_user_management(settings=settings)

        assert isinstance(services.analytics_service, NullAnalyticsService)
        assert len(services.user_repository) == 3
        assert services.get_user_profile._user_repository is services.user_repository

    def test_unseeded_repository(self):
        settings = Settings(ENVIRONMENT="test", SEED_DEMO_USERS=False)
        assert len(build_user_management(settings=settings).user_repository) == 0

    def test_overrides_are_used(self, services, repository, analytics):
        assert services.user_repository is repository
        assert services.analytics_service is analytics
        assert services.upgrade_membership._analytics_service is analytics
