"""Dependency injection container (composition root).

Application-scoped singletons are cached factories; request-scoped objects
(config provider, daemon notifier, session store, authentication service)
are created per call.

Usage:
    from hostpanel.core.container import build_authentication_service, get_session_store
"""

from hostpanel.core.container.auth import build_authentication_service
from hostpanel.core.container.events import get_event_bus, new_event_bus
from hostpanel.core.container.infrastructure import (
    get_config_provider,
    get_daemon_notifier,
    get_database,
    get_logger,
    get_password_service,
    get_redis,
    get_session_store,
)

__all__ = [
    "build_authentication_service",
    "get_config_provider",
    "get_daemon_notifier",
    "get_database",
    "get_event_bus",
    "get_logger",
    "get_password_service",
    "get_redis",
    "get_session_store",
    "new_event_bus",
]
