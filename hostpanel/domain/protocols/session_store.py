"""SessionStore protocol (port) for the signed-in identity."""

from typing import Protocol

from hostpanel.domain.entities.identity import Identity, SuIdentity


class SessionStore(Protocol):
    """Storage of the identity bound to one browser session.

    Implementations:
        - InMemorySessionStore: single process, tests and CLI
        - RedisSessionStore: shared across panel workers
    """

    def read(self) -> Identity | SuIdentity | None:
        """Return the stored identity, or None."""
        ...

    def write(self, identity: Identity | SuIdentity) -> None:
        """Store ``identity``, replacing any stored identity."""
        ...

    def clear(self) -> None:
        """Remove the stored identity."""
        ...

    def is_empty(self) -> bool:
        """Whether no identity is stored."""
        ...
