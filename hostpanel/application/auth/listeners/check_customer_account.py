"""Customer account status listener (AFTER phase).

Applies to valid results of ordinary users only; administrators and
resellers bypass it. Downgrades the result when the customer account is
missing, suspended or expired. The identity stays attached to the
downgraded result.
"""

import time

from hostpanel.application.auth.auth_event import AuthEvent
from hostpanel.application.auth.auth_result import AuthResult
from hostpanel.application.auth.decisions import NO_OPINION, Decision, SetResult
from hostpanel.domain.enums import AuthResultCode, UserType
from hostpanel.domain.errors import AuthMessage
from hostpanel.domain.protocols.account_status_store import AccountStatusStore
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol


class CheckCustomerAccount:
    """Deny sign-in to missing, suspended or expired customer accounts."""

    PRIORITY = 99

    def __init__(self, account_status_store: AccountStatusStore, logger: LoggerProtocol) -> None:
        self._account_status_store = account_status_store
        self._logger = logger

    def handle(self, event: AuthEvent) -> Decision:
        result = event.result
        if result is None or not result.is_valid or result.identity is None:
            return NO_OPINION

        identity = result.identity
        if identity.user_type is not UserType.USER:
            return NO_OPINION

        status = self._account_status_store.get_status(identity.user_id)

        if status is None:
            self._logger.error(
                "customer_account_missing",
                user_id=identity.user_id,
                username=identity.username,
            )
            return SetResult(
                result=AuthResult.failure(
                    AuthResultCode.FAILURE, AuthMessage.UNEXPECTED_ERROR, identity=identity
                )
            )

        if not status.enabled:
            self._logger.info("sign_in_refused_suspended", user_id=identity.user_id)
            return SetResult(
                result=AuthResult.failure(
                    AuthResultCode.FAILURE_UNCATEGORIZED,
                    AuthMessage.ACCOUNT_SUSPENDED,
                    identity=identity,
                )
            )

        if status.is_expired(int(time.time())):
            self._logger.info(
                "sign_in_refused_expired",
                user_id=identity.user_id,
                expires_at=status.expires_at,
            )
            return SetResult(
                result=AuthResult.failure(
                    AuthResultCode.FAILURE_UNCATEGORIZED,
                    AuthMessage.ACCOUNT_EXPIRED,
                    identity=identity,
                )
            )

        return NO_OPINION
