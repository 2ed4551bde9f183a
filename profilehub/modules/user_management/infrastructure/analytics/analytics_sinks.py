# 📄 File: profilehub/modules/user_management/infrastructure/analytics/analytics_sinks.py
# 🧭 Purpose (Layman Explanation):
# Where reports like "profile viewed" or "upgrade rejected" actually go: written to the
# application log, thrown away, or kept in a list so tests can check them
#
# 🧪 Purpose (Technical Summary):
# Concrete AnalyticsService sinks. Events are enriched with global properties, the
# current user id, a UTC timestamp and a per-sink session id before being emitted
#
# 🔗 Dependencies:
# - profilehub.modules.user_management.application.services.analytics_service (port)
# - profilehub.shared.utils.logging (StructuredLogger business events, user context)
#
# 🔄 Connected Modules / Calls From:
# - profilehub.bootstrap (create_analytics_service)
# - Use case tests (InMemoryAnalyticsService)

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from profilehub.modules.user_management.application.services.analytics_service import AnalyticsService
from profilehub.shared.utils.logging import get_logger, user_id_var


def _new_session_id() -> str:
    return f"session_{uuid4().hex[:12]}"


class _EnrichingAnalyticsService(AnalyticsService):
    """Shared enrichment for sinks that keep event payloads."""

    def __init__(self):
        self._global_properties: Dict[str, Any] = {}
        self._user_id: Optional[str] = None
        self.session_id = _new_session_id()

    def set_user_id(self, user_id: str) -> None:
        self._user_id = user_id

    def set_global_properties(self, properties: Dict[str, Any]) -> None:
        self._global_properties = {**self._global_properties, **properties}

    @property
    def global_properties(self) -> Dict[str, Any]:
        return dict(self._global_properties)

    def _current_user_id(self) -> Optional[str]:
        return self._user_id

    def _enrich(self, properties: Dict[str, Any]) -> Dict[str, Any]:
        # Event properties win over globals, enrichment keys win over both
        return {
            **self._global_properties,
            **(properties or {}),
            "analytics_user_id": self._current_user_id(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "session_id": self.session_id,
        }


class LoggingAnalyticsService(_EnrichingAnalyticsService):
    """
    Emit analytics events as structured business-event log records.

    The user id is taken from the request-scoped logging context, so
    concurrent requests never see each other's identity.
    """

    def __init__(self, logger_name: str = "profilehub.analytics"):
        super().__init__()
        self._logger = get_logger(logger_name)

    def set_user_id(self, user_id: str) -> None:
        user_id_var.set(user_id or "")
        self._logger.debug("Analytics user id set", extra={"analytics_user_id": user_id})

    def set_global_properties(self, properties: Dict[str, Any]) -> None:
        super().set_global_properties(properties)
        self._logger.debug("Analytics global properties updated", extra={"global_properties": self.global_properties})

    def _current_user_id(self) -> Optional[str]:
        return user_id_var.get() or None

    def track(self, event: str, properties: Dict[str, Any]) -> None:
        enriched = self._enrich(properties)
        self._logger.log_business_event(
            event_type=event,
            description=f"Analytics event {event}",
            entity_id=enriched.get("user_id"),
            entity_type="user",
            extra={"properties": enriched},
        )


class NullAnalyticsService(AnalyticsService):
    """Discard every event."""

    def track(self, event: str, properties: Dict[str, Any]) -> None:
        return None

    def set_user_id(self, user_id: str) -> None:
        return None

    def set_global_properties(self, properties: Dict[str, Any]) -> None:
        return None


@dataclass(frozen=True)
class TrackedEvent:
    """An analytics event captured by InMemoryAnalyticsService."""
    name: str
    properties: Dict[str, Any] = field(default_factory=dict)


class InMemoryAnalyticsService(_EnrichingAnalyticsService):
    """Record enriched events in order; used by tests and local debugging."""

    def __init__(self):
        super().__init__()
        self.events: List[TrackedEvent] = []

    def track(self, event: str, properties: Dict[str, Any]) -> None:
        self.events.append(TrackedEvent(name=event, properties=self._enrich(properties)))

    @property
    def event_names(self) -> List[str]:
        return [event.name for event in self.events]

    def events_named(self, name: str) -> List[TrackedEvent]:
        return [event for event in self.events if event.name == name]


_BACKENDS = {
    "logging": LoggingAnalyticsService,
    "null": NullAnalyticsService,
    "memory": InMemoryAnalyticsService,
}


def create_analytics_service(backend: str = "logging") -> AnalyticsService:
    """
    Build an analytics sink by name.

    Args:
        backend: One of "logging", "null", "memory"

    Raises:
        ValueError: For an unknown backend name
    """
    try:
        service_class = _BACKENDS[backend.lower()]
    except KeyError:
        raise ValueError(f"Unknown analytics backend '{backend}', expected one of {sorted(_BACKENDS)}")
    return service_class()
