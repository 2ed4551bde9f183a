# 📄 File: profilehub/modules/user_management/infrastructure/analytics/__init__.py
# 🧭 Purpose (Layman Explanation):
# The places activity reports can be sent: the log, nowhere, or a list kept for tests
# 🧪 Purpose (Technical Summary):
# AnalyticsService implementations and the factory selecting one by name
# 🔗 Dependencies:
# analytics_sinks.py
# 🔄 Connected Modules / Calls From:
# profilehub.bootstrap, tests

from .analytics_sinks import (
    InMemoryAnalyticsService,
    LoggingAnalyticsService,
    NullAnalyticsService,
    TrackedEvent,
    create_analytics_service,
)

__all__ = [
    "InMemoryAnalyticsService",
    "LoggingAnalyticsService",
    "NullAnalyticsService",
    "TrackedEvent",
    "create_analytics_service",
]
