"""Customer account status entity."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class AccountStatus:
    """Enable flag and expiry date of a customer account.

    Attributes:
        enabled: False once the reseller suspended the account.
        expires_at: Expiry as a unix timestamp, 0 when the account never
            expires.
    """

    enabled: bool
    expires_at: int = 0

    def is_expired(self, now: int) -> bool:
        """Check whether the account expired before ``now``.

        Args:
            now: Current unix timestamp.

        Returns:
            bool: True if an expiry date is set and lies in the past.
        """
        return self.expires_at != 0 and self.expires_at < now
