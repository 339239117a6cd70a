"""CredentialStore protocol (port) for account credentials.

Implementations:
    - SqlCredentialStore: hostpanel/infrastructure/persistence/repositories/

Errors raised by implementations (connection loss, SQL errors) are NOT
authentication failures and propagate to the request handler.
"""

from typing import Protocol

from hostpanel.domain.entities.identity import Identity


class CredentialStore(Protocol):
    """Lookup and update of account credentials."""

    def find_by_username(self, username: str) -> Identity | None:
        """Find exactly one account by normalized username.

        Args:
            username: IDNA-encoded, lower-cased username.

        Returns:
            Identity with its stored password hash, or None.
        """
        ...

    def find_by_id(self, user_id: int) -> Identity | None:
        """Find an account by identifier.

        Args:
            user_id: Account identifier.

        Returns:
            Identity with its stored password hash, or None.
        """
        ...

    def update_password_hash(self, user_id: int, new_hash: str, new_status: str) -> None:
        """Replace the stored password hash of an account.

        Args:
            user_id: Account identifier.
            new_hash: Replacement hash.
            new_status: Account status to store alongside ("tochangepwd" asks
                the backend daemon to propagate the change, "ok" otherwise).
        """
        ...
