"""LoginAttemptStore protocol (port) for brute-force detection."""

from typing import Protocol

from hostpanel.domain.entities.login_attempt import LoginAttempt


class LoginAttemptStore(Protocol):
    """Per-IP sign-in attempt counters."""

    def find_by_ip(self, ip_address: str) -> LoginAttempt | None:
        """Return the attempt record of ``ip_address``, or None."""
        ...

    def create(self, ip_address: str, session_id: str | None, now: int) -> None:
        """Create a record with one attempt at ``now``."""
        ...

    def increment(self, ip_address: str, now: int) -> None:
        """Add one attempt to the record of ``ip_address`` at ``now``."""
        ...

    def purge_before(self, timestamp: int) -> int:
        """Delete records whose last attempt is older than ``timestamp``.

        Returns:
            int: Number of deleted records.
        """
        ...
