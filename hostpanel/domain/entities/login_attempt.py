"""Login attempt record used for brute-force detection."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class LoginAttempt:
    """Sign-in attempts recorded for one client IP address.

    Attributes:
        ip_address: Client IP address.
        session_id: Session of the latest attempt (None for CLI callers).
        login_count: Attempts since the record was created.
        last_access: Unix timestamp of the latest attempt.
    """

    ip_address: str
    login_count: int
    last_access: int
    session_id: str | None = None

    def blocked_until(self, max_login: int, block_time: int) -> int | None:
        """Unix timestamp until which the IP address is blocked.

        Args:
            max_login: Attempts before blocking.
            block_time: Blocking time in minutes.

        Returns:
            int | None: End of the block, None when the threshold is not reached.
        """
        if self.login_count < max_login:
            return None
        return self.last_access + block_time * 60

    def waiting_until(self, max_before_wait: int, wait_time: int) -> int | None:
        """Unix timestamp before which the next attempt must not happen.

        Args:
            max_before_wait: Attempts before the waiting time applies.
            wait_time: Waiting time in seconds.

        Returns:
            int | None: End of the waiting time, None when the threshold is
                not reached.
        """
        if self.login_count < max_before_wait:
            return None
        return self.last_access + wait_time
