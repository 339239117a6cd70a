"""In-process SessionStore (tests, CLI tools, single-worker deployments)."""

from hostpanel.domain.entities.identity import Identity, SuIdentity


class InMemorySessionStore:
    """Hold the identity of one session in process memory."""

    def __init__(self) -> None:
        self._identity: Identity | SuIdentity | None = None

    def read(self) -> Identity | SuIdentity | None:
        return self._identity

    def write(self, identity: Identity | SuIdentity) -> None:
        self._identity = identity

    def clear(self) -> None:
        self._identity = None

    def is_empty(self) -> bool:
        return self._identity is None
