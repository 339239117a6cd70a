"""SessionStore adapters."""

from hostpanel.infrastructure.session.in_memory_session_store import (
    InMemorySessionStore,
)
from hostpanel.infrastructure.session.redis_session_store import RedisSessionStore

__all__ = ["InMemorySessionStore", "RedisSessionStore"]
