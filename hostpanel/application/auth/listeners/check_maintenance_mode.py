"""Maintenance mode listener (AFTER phase).

While maintenance mode is on, only administrators may sign in. Valid
results of any other account type are downgraded to FAILURE_UNCATEGORIZED
carrying the configured maintenance message.
"""

from hostpanel.application.auth.auth_event import AuthEvent
from hostpanel.application.auth.auth_result import AuthResult
from hostpanel.application.auth.decisions import NO_OPINION, Decision, SetResult
from hostpanel.core.config import DEFAULT_MAINTENANCE_MESSAGE
from hostpanel.domain.enums import AuthResultCode, ConfigKey, UserType
from hostpanel.domain.protocols.config_provider import ConfigProvider
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol


class CheckMaintenanceMode:
    """Deny sign-in to non-administrators during maintenance."""

    PRIORITY = 99

    def __init__(self, config: ConfigProvider, logger: LoggerProtocol) -> None:
        self._config = config
        self._logger = logger

    def handle(self, event: AuthEvent) -> Decision:
        result = event.result
        if result is None or not result.is_valid or result.identity is None:
            return NO_OPINION

        if result.identity.user_type is UserType.ADMIN:
            return NO_OPINION

        if not self._config.get(ConfigKey.MAINTENANCE_MODE, False):
            return NO_OPINION

        self._logger.info(
            "sign_in_refused_maintenance",
            user_id=result.identity.user_id,
            user_type=result.identity.user_type.value,
        )
        return SetResult(
            result=AuthResult.failure(
                AuthResultCode.FAILURE_UNCATEGORIZED,
                self._message(),
                identity=result.identity,
            )
        )

    def _message(self) -> str:
        template = self._config.get(ConfigKey.MAINTENANCE_MESSAGE) or DEFAULT_MAINTENANCE_MESSAGE
        # Messages edited in the admin UI may span several lines
        return " ".join(str(template).split())
