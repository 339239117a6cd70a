"""Brute-force detection listener (BEFORE phase).

Counts sign-in attempts per client IP address:

- Records older than the blocking time are purged first.
- Once ``BRUTEFORCE_MAX_LOGIN`` attempts are reached, the address is blocked
  for ``BRUTEFORCE_BLOCK_TIME`` minutes after its latest attempt.
- With ``BRUTEFORCE_BETWEEN`` enabled, once
  ``BRUTEFORCE_MAX_ATTEMPTS_BEFORE_WAIT`` attempts are reached, consecutive
  attempts must be ``BRUTEFORCE_BETWEEN_TIME`` seconds apart.

A blocked or waiting client stops the BEFORE phase; the service turns the
stop message into a FAILURE_UNCATEGORIZED result without resolving any
identity. Every other attempt is recorded and the pipeline continues.
"""

import time

from hostpanel.application.auth.auth_event import AuthEvent
from hostpanel.application.auth.decisions import NO_OPINION, Decision, StopPropagation
from hostpanel.domain.enums import ConfigKey
from hostpanel.domain.errors import AuthMessage
from hostpanel.domain.protocols.config_provider import ConfigProvider
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol
from hostpanel.domain.protocols.login_attempt_store import LoginAttemptStore


def format_remaining(seconds: int) -> str:
    """Format a duration as MM:SS.

    Example:
        >>> format_remaining(95)
        '01:35'
    """
    minutes, seconds = divmod(max(seconds, 0), 60)
    return f"{minutes:02d}:{seconds:02d}"


class BruteForceGuard:
    """Block or slow down clients that keep failing to sign in."""

    PRIORITY = 100

    def __init__(
        self,
        attempt_store: LoginAttemptStore,
        config: ConfigProvider,
        logger: LoggerProtocol,
    ) -> None:
        self._attempt_store = attempt_store
        self._config = config
        self._logger = logger

    def handle(self, event: AuthEvent) -> Decision:
        ip_address = event.credentials.client_ip
        if not ip_address:
            return NO_OPINION

        now = int(time.time())
        max_login = int(self._config.get(ConfigKey.BRUTEFORCE_MAX_LOGIN, 3))
        block_time = int(self._config.get(ConfigKey.BRUTEFORCE_BLOCK_TIME, 30))

        self._attempt_store.purge_before(now - block_time * 60)
        attempt = self._attempt_store.find_by_ip(ip_address)

        if attempt is not None:
            blocked_until = attempt.blocked_until(max_login, block_time)
            if blocked_until is not None:
                if now < blocked_until:
                    self._logger.warning(
                        "sign_in_blocked",
                        client_ip=ip_address,
                        login_count=attempt.login_count,
                    )
                    return StopPropagation(
                        AuthMessage.BLOCKED.format(remaining=format_remaining(blocked_until - now))
                    )
            elif self._config.get(ConfigKey.BRUTEFORCE_BETWEEN, False):
                waiting_until = attempt.waiting_until(
                    int(self._config.get(ConfigKey.BRUTEFORCE_MAX_ATTEMPTS_BEFORE_WAIT, 2)),
                    int(self._config.get(ConfigKey.BRUTEFORCE_BETWEEN_TIME, 30)),
                )
                if waiting_until is not None and now < waiting_until:
                    self._logger.info("sign_in_throttled", client_ip=ip_address)
                    return StopPropagation(
                        AuthMessage.MUST_WAIT.format(remaining=format_remaining(waiting_until - now))
                    )

        if attempt is None:
            self._attempt_store.create(ip_address, event.credentials.session_id, now)
        else:
            self._attempt_store.increment(ip_address, now)
        return NO_OPINION
