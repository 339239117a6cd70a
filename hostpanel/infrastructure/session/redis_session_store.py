"""Redis-backed SessionStore.

Stores the identity of one browser session as JSON under
``hostpanel:session:<session_id>:identity`` so that every panel worker sees
the same principal. Keys expire after ``session_timeout`` seconds of
inactivity; each read refreshes the expiry.

Architecture:
- Implements SessionStore without inheritance (structural typing)
- Connection errors (RedisError) propagate: they are infrastructure
  failures, not authentication decisions
- Undecodable entries are logged, deleted, and read as "no identity"
"""

import json

from redis import Redis

from hostpanel.domain.entities.identity import (
    Identity,
    SuIdentity,
    identity_from_dict,
)
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol

KEY_PREFIX = "hostpanel:session"


class RedisSessionStore:
    """Redis implementation of SessionStore.

    Attributes:
        session_id: Browser session the store is bound to.
        ttl: Expiry in seconds.
    """

    def __init__(
        self,
        redis_client: Redis,
        session_id: str,
        logger: LoggerProtocol,
        *,
        ttl: int = 1800,
    ) -> None:
        """Initialize store for one session.

        Args:
            redis_client: Synchronous Redis client.
            session_id: Browser session identifier.
            logger: Logger for corrupt entries.
            ttl: Seconds before an untouched identity expires.

        Raises:
            ValueError: If session_id is empty.
        """
        if not session_id:
            raise ValueError("session_id must not be empty")
        self._redis = redis_client
        self._logger = logger
        self.session_id = session_id
        self.ttl = ttl

    @property
    def key(self) -> str:
        """Redis key holding the identity."""
        return f"{KEY_PREFIX}:{self.session_id}:identity"

    def read(self) -> Identity | SuIdentity | None:
        """Load the stored identity and refresh its expiry.

        Returns:
            Identity | SuIdentity | None: Stored identity, or None when absent
                or undecodable.
        """
        raw = self._redis.get(self.key)
        if raw is None:
            return None

        try:
            payload = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            identity = identity_from_dict(json.loads(payload))
        except (KeyError, ValueError, TypeError) as e:
            self._logger.warning(
                "session_identity_corrupt",
                session_id=self.session_id,
                error_type=type(e).__name__,
            )
            self._redis.delete(self.key)
            return None

        self._redis.expire(self.key, self.ttl)
        return identity

    def write(self, identity: Identity | SuIdentity) -> None:
        """Store ``identity`` (password hash never included)."""
        self._redis.set(self.key, json.dumps(identity.to_dict()), ex=self.ttl)

    def clear(self) -> None:
        self._redis.delete(self.key)

    def is_empty(self) -> bool:
        return not self._redis.exists(self.key)
