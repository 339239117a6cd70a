"""Logging event handler for domain events.

Structured logging of sign-in outcomes and credential maintenance.

Log Levels:
    - INFO: UserSignInSucceeded, PasswordHashUpgraded
    - WARNING: UserSignInFailed

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - user_id / username: when available
    - reason: AuthResultCode value (failures)

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> logging_handler.subscribe_to(event_bus)
"""

from hostpanel.domain.events import (
    PasswordHashUpgraded,
    UserSignInFailed,
    UserSignInSucceeded,
)
from hostpanel.domain.protocols.event_bus_protocol import EventBusProtocol
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def subscribe_to(self, event_bus: EventBusProtocol) -> None:
        """Subscribe every handler method to its event."""
        event_bus.subscribe(UserSignInSucceeded, self.handle_user_sign_in_succeeded)
        event_bus.subscribe(UserSignInFailed, self.handle_user_sign_in_failed)
        event_bus.subscribe(PasswordHashUpgraded, self.handle_password_hash_upgraded)

    # =========================================================================
    # Sign-in Event Handlers
    # =========================================================================

    def handle_user_sign_in_succeeded(self, event: UserSignInSucceeded) -> None:
        """Log successful sign-in (INFO level)."""
        self._logger.info(
            "user_sign_in_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=event.user_id,
            username=event.username,
            user_type=event.user_type,
        )

    def handle_user_sign_in_failed(self, event: UserSignInFailed) -> None:
        """Log denied sign-in (WARNING level)."""
        self._logger.warning(
            "user_sign_in_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            username=event.username,
            reason=event.reason,
            user_id=event.user_id,
            client_ip=event.client_ip,
        )

    # =========================================================================
    # Credential Maintenance Event Handlers
    # =========================================================================

    def handle_password_hash_upgraded(self, event: PasswordHashUpgraded) -> None:
        """Log password hash upgrade (INFO level)."""
        self._logger.info(
            "password_hash_upgrade_recorded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=event.user_id,
            username=event.username,
            previous_algorithm=event.previous_algorithm,
        )
