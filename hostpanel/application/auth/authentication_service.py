"""Authentication service.

Runs one authentication attempt as a linear state machine:

    START -> BEFORE -> DURING -> AFTER -> DONE

- BEFORE: early gates. A stop ends the attempt with FAILURE_UNCATEGORIZED
  carrying the stop value; DURING and AFTER never run.
- DURING: identity resolution. If no listener set a result, the attempt
  fails with FAILURE_UNCATEGORIZED ("Unknown reason.").
- AFTER: always dispatched, so policy gates can downgrade a valid result and
  side-effect listeners can react to failures.
- DONE: deferred post-success actions run only when the final result is
  valid; the outcome is published on the event bus.

authenticate() never touches session storage. sign_in() stores the identity
only after a SUCCESS survived every phase. Exceptions raised by listeners or
their collaborators propagate to the caller unchanged.

The service also hosts the identity helpers used around sign-in: identity
storage, the per-request access check, and switching to another account.
"""

from urllib.parse import urlsplit

from hostpanel.application.auth.auth_event import AuthEvent, Credentials
from hostpanel.application.auth.auth_result import AuthResult
from hostpanel.application.auth.listener_registry import DispatchOutcome, ListenerRegistry
from hostpanel.core.enums import ErrorCode
from hostpanel.core.errors import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
)
from hostpanel.core.result import Failure, Result, Success
from hostpanel.domain.entities.identity import Identity, SuIdentity
from hostpanel.domain.enums import AuthPhase, AuthResultCode, ConfigKey, UserType
from hostpanel.domain.errors import AuthMessage
from hostpanel.domain.events import UserSignInFailed, UserSignInSucceeded
from hostpanel.domain.protocols.config_provider import ConfigProvider
from hostpanel.domain.protocols.credential_store import CredentialStore
from hostpanel.domain.protocols.event_bus_protocol import EventBusProtocol
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol
from hostpanel.domain.protocols.session_store import SessionStore

ALL_USER_TYPES = "all"


def is_admin_backed(identity: Identity | SuIdentity) -> bool:
    """Whether an administrator ultimately stands behind ``identity``.

    True for administrators, for administrators acting as another account,
    and for nested switches (only an administrator can switch twice).
    """
    if identity.user_type is UserType.ADMIN:
        return True
    if isinstance(identity, SuIdentity):
        return identity.su_user_type is UserType.ADMIN or isinstance(
            identity.su_identity, SuIdentity
        )
    return False


def _host_of(value: str) -> str | None:
    if "//" not in value:
        value = f"//{value}"
    host = urlsplit(value).hostname
    return host.lower() if host else None


class AuthenticationService:
    """Orchestrates authentication attempts and the signed-in identity.

    Attributes:
        _registry: Listener registry, owned by this service.
        _session: Storage of the signed-in identity.
        _logger: Structured logger.
        _event_bus: Optional bus receiving sign-in outcome events.
        _config: Optional configuration (maintenance rule of
            check_authentication).
        _credential_store: Optional store (target lookup of switch_user).

    Example:
        >>> service = AuthenticationService(registry, session_store, logger)
        >>> result = service.sign_in(Credentials(username="bob", password="secret"))
        >>> result.is_valid
        True
        >>> service.get_identity().username
        'bob'
    """

    def __init__(
        self,
        registry: ListenerRegistry,
        session_store: SessionStore,
        logger: LoggerProtocol,
        *,
        event_bus: EventBusProtocol | None = None,
        config: ConfigProvider | None = None,
        credential_store: CredentialStore | None = None,
    ) -> None:
        self._registry = registry
        self._session = session_store
        self._logger = logger
        self._event_bus = event_bus
        self._config = config
        self._credential_store = credential_store

    @property
    def registry(self) -> ListenerRegistry:
        return self._registry

    # =========================================================================
    # Authentication pipeline
    # =========================================================================

    def authenticate(self, credentials: Credentials) -> AuthResult:
        """Run one authentication attempt through all phases.

        Args:
            credentials: Submitted sign-in data.

        Returns:
            AuthResult: Final result. Never None.

        Raises:
            Exception: Anything raised by a listener or a collaborator
                (database errors, for instance). No session state is written.
        """
        event = AuthEvent(phase=AuthPhase.BEFORE, target=self, credentials=credentials)

        before = self._registry.dispatch(AuthPhase.BEFORE, event)
        if before.stopped:
            result = AuthResult.failure(
                AuthResultCode.FAILURE_UNCATEGORIZED,
                *self._stop_messages(before),
            )
            self._logger.info(
                "authentication_stopped",
                phase=AuthPhase.BEFORE.value,
                username=credentials.username,
                client_ip=credentials.client_ip,
            )
            self._publish_outcome(credentials, result)
            return result

        during = self._registry.dispatch(AuthPhase.DURING, before.event)
        event = during.event
        if event.result is None:
            message = during.stop_value if during.stopped and during.stop_value else None
            event = event.with_result(
                AuthResult.failure(
                    AuthResultCode.FAILURE_UNCATEGORIZED,
                    message or AuthMessage.UNKNOWN_REASON,
                )
            )

        after = self._registry.dispatch(AuthPhase.AFTER, event)
        event = after.event
        result = event.result
        assert result is not None  # set by DURING or the fallback above

        if result.is_valid:
            for action in event.post_success_actions:
                action(result)

        self._publish_outcome(credentials, result)
        return result

    def sign_in(self, credentials: Credentials) -> AuthResult:
        """Authenticate and, on success, store the identity in the session.

        Args:
            credentials: Submitted sign-in data.

        Returns:
            AuthResult: Final result of the attempt.
        """
        result = self.authenticate(credentials)
        if result.is_valid and result.identity is not None:
            self.set_identity(result.identity)
        return result

    # =========================================================================
    # Identity storage
    # =========================================================================

    def get_identity(self) -> Identity | SuIdentity | None:
        return self._session.read()

    def has_identity(self) -> bool:
        return not self._session.is_empty()

    def clear_identity(self) -> None:
        self._session.clear()

    def set_identity(self, identity: Identity | SuIdentity) -> None:
        """Store ``identity``, clearing any previously stored identity first."""
        if self.has_identity():
            self.clear_identity()
        self._session.write(identity)
        self._logger.info(
            "identity_stored",
            user_id=identity.user_id,
            user_type=identity.user_type.value,
        )

    def ui_path(self, location: str = "index.php") -> str | None:
        """Path of ``location`` inside the signed-in identity's interface.

        Returns:
            str | None: e.g. "/client/index.php", None when nobody is signed in.
        """
        identity = self.get_identity()
        if identity is None:
            return None
        return f"/{identity.user_type.ui_level}/{location.lstrip('/')}"

    # =========================================================================
    # Access check
    # =========================================================================

    def check_authentication(
        self,
        user_type: UserType | str = ALL_USER_TYPES,
        *,
        prevent_external_login: bool | None = None,
        referer: str | None = None,
        request_host: str | None = None,
    ) -> Result[Identity | SuIdentity, DomainError]:
        """Check the signed-in identity before serving a protected page.

        The stored identity is cleared whenever the check fails for a
        signed-in identity.

        Args:
            user_type: Required account type, or "all".
            prevent_external_login: Reject requests referred by a foreign host.
                None reads PREVENT_EXTERNAL_LOGIN from the configuration.
            referer: Referer header of the request.
            request_host: Host the request was addressed to.

        Returns:
            Success(identity), or Failure with NOT_AUTHENTICATED,
            MAINTENANCE_MODE, USER_TYPE_MISMATCH or EXTERNAL_LOGIN_REJECTED.
        """
        identity = self.get_identity()
        if identity is None:
            self.clear_identity()
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.NOT_AUTHENTICATED,
                    message=AuthMessage.NOT_AUTHENTICATED,
                )
            )

        if self._maintenance_mode() and not is_admin_backed(identity):
            return self._deny(
                identity,
                AuthenticationError(
                    code=ErrorCode.MAINTENANCE_MODE,
                    message=AuthMessage.MAINTENANCE_ACTIVE,
                ),
            )

        if user_type != ALL_USER_TYPES and identity.user_type is not UserType(user_type):
            return self._deny(
                identity,
                AuthorizationError(
                    code=ErrorCode.USER_TYPE_MISMATCH,
                    message=AuthMessage.USER_TYPE_MISMATCH,
                    details={"required": UserType(user_type).value},
                ),
            )

        if prevent_external_login is None:
            prevent_external_login = self._prevent_external_login()

        if prevent_external_login and referer:
            referer_host = _host_of(referer)
            if referer_host is not None and referer_host != _host_of(request_host or ""):
                return self._deny(
                    identity,
                    AuthorizationError(
                        code=ErrorCode.EXTERNAL_LOGIN_REJECTED,
                        message=AuthMessage.EXTERNAL_LOGIN,
                        details={"referer_host": referer_host},
                    ),
                )

        return Success(value=identity)

    # =========================================================================
    # Switch user
    # =========================================================================

    def switch_user(self, user_id: int | None = None) -> Result[Identity | SuIdentity, DomainError]:
        """Become another account, or switch back to the previous one.

        Rules:
            - Guests cannot switch; nobody can become themselves.
            - Administrators and resellers can become another account; a
              reseller only one of its own customers. Ordinary users cannot.
            - An administrator acting as a reseller can become one of that
              reseller's customers, or switch back.
            - Any other switched identity can only switch back.

        Args:
            user_id: Account to become, or None to switch back.

        Returns:
            Success(new identity), stored in the session; or Failure with
            NOT_AUTHENTICATED, SWITCH_USER_NOT_ALLOWED or USER_NOT_FOUND.

        Raises:
            RuntimeError: If the service has no credential store.
        """
        identity = self.get_identity()
        if identity is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.NOT_AUTHENTICATED,
                    message=AuthMessage.SWITCH_USER_GUEST,
                )
            )

        if user_id is not None and identity.user_id == user_id:
            return self._refuse_switch(identity, AuthMessage.SWITCH_USER_SELF)

        if isinstance(identity, SuIdentity):
            outcome = self._switch_from_su(identity, user_id)
        elif user_id is None or identity.user_type is UserType.USER:
            outcome = self._refuse_switch(identity, AuthMessage.SWITCH_USER_FORBIDDEN)
        else:
            outcome = self._become(identity, user_id)

        if isinstance(outcome, Success):
            self.set_identity(outcome.value)
            self._logger.info(
                "user_switched",
                from_user_id=identity.user_id,
                to_user_id=outcome.value.user_id,
            )
        return outcome

    def _switch_from_su(
        self, identity: SuIdentity, user_id: int | None
    ) -> Result[Identity | SuIdentity, DomainError]:
        # Administrator acting as reseller, then as one of its customers
        if isinstance(identity.su_identity, SuIdentity):
            if user_id is not None:
                return self._refuse_switch(identity, AuthMessage.SWITCH_USER_FORBIDDEN)
            return Success(value=identity.su_identity)

        if identity.su_user_type is UserType.ADMIN and identity.user_type is UserType.RESELLER:
            if user_id is None:
                return Success(value=identity.su_identity)
            return self._become(identity, user_id)

        if identity.su_user_type in (UserType.ADMIN, UserType.RESELLER):
            if user_id is not None:
                return self._refuse_switch(identity, AuthMessage.SWITCH_USER_FORBIDDEN)
            return Success(value=identity.su_identity)

        return self._refuse_switch(identity, AuthMessage.SWITCH_USER_FORBIDDEN)

    def _become(
        self, identity: Identity | SuIdentity, user_id: int
    ) -> Result[Identity | SuIdentity, DomainError]:
        if self._credential_store is None:
            raise RuntimeError("switch_user requires a credential store")

        target = self._credential_store.find_by_id(user_id)
        if target is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message=AuthMessage.SWITCH_USER_NOT_FOUND,
                    resource_type="user",
                    resource_id=str(user_id),
                )
            )

        # Resellers (real or assumed) may only become their own customers
        if identity.user_type is UserType.RESELLER and (
            target.user_type is not UserType.USER or target.created_by != identity.user_id
        ):
            return self._refuse_switch(identity, AuthMessage.SWITCH_USER_NOT_OWNED)

        return Success(value=SuIdentity(su_identity=identity, identity=target.without_password()))

    def _refuse_switch(
        self, identity: Identity | SuIdentity, message: str
    ) -> Failure[DomainError]:
        self._logger.warning(
            "user_switch_refused",
            user_id=identity.user_id,
            user_type=identity.user_type.value,
        )
        return Failure(
            error=AuthorizationError(code=ErrorCode.SWITCH_USER_NOT_ALLOWED, message=message)
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _deny(self, identity: Identity | SuIdentity, error: DomainError) -> Failure[DomainError]:
        self.clear_identity()
        self._logger.warning(
            "access_denied",
            user_id=identity.user_id,
            error_code=error.code.value,
        )
        return Failure(error=error)

    def _maintenance_mode(self) -> bool:
        if self._config is None:
            return False
        return bool(self._config.get(ConfigKey.MAINTENANCE_MODE, False))

    def _prevent_external_login(self) -> bool:
        if self._config is None:
            return True
        return bool(self._config.get(ConfigKey.PREVENT_EXTERNAL_LOGIN, True))

    @staticmethod
    def _stop_messages(outcome: DispatchOutcome) -> tuple[str, ...]:
        if outcome.stop_value:
            return (outcome.stop_value,)
        return ()

    def _publish_outcome(self, credentials: Credentials, result: AuthResult) -> None:
        if self._event_bus is None:
            return

        if result.is_valid and result.identity is not None:
            self._event_bus.publish(
                UserSignInSucceeded(
                    user_id=result.identity.user_id,
                    username=result.identity.username,
                    user_type=result.identity.user_type.value,
                )
            )
            return

        self._event_bus.publish(
            UserSignInFailed(
                username=credentials.username,
                reason=result.code.value,
                user_id=result.identity.user_id if result.identity else None,
                client_ip=credentials.client_ip,
            )
        )
