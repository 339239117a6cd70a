"""AccountStatusStore protocol (port) for customer account state."""

from typing import Protocol

from hostpanel.domain.entities.account_status import AccountStatus


class AccountStatusStore(Protocol):
    """Read access to the enable flag and expiry date of customer accounts."""

    def get_status(self, user_id: int) -> AccountStatus | None:
        """Return the status of the customer account owned by ``user_id``.

        Args:
            user_id: Account identifier of an ordinary user.

        Returns:
            AccountStatus, or None when no customer account row exists
            (data inconsistency).
        """
        ...
