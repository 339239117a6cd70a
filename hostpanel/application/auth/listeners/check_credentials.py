"""Credential check listener (DURING phase).

Primary identity resolver of the pipeline.

Flow:
    1. Skip when an earlier listener already set an invalid result.
    2. Empty username or password: FAILURE_CREDENTIAL_INVALID, no lookup.
    3. Look up the account by normalized username.
    4. Verify the password against the stored hash (bcrypt or legacy MD5
       formats, timing-safe).
    5. SUCCESS with the password hash stripped from the identity. A legacy
       hash attaches a RehashPassword post-success action.

Security:
    Unknown usernames and wrong passwords yield the same code and message,
    so the result never reveals whether an account exists.
"""

from hostpanel.application.auth.auth_event import AuthEvent
from hostpanel.application.auth.auth_result import AuthResult
from hostpanel.application.auth.decisions import NO_OPINION, Decision, SetResult
from hostpanel.application.auth.listeners.rehash_password import RehashPassword
from hostpanel.domain.entities.identity import normalize_username
from hostpanel.domain.enums import AuthResultCode
from hostpanel.domain.errors import AuthMessage
from hostpanel.domain.protocols.credential_store import CredentialStore
from hostpanel.domain.protocols.daemon_notifier import DaemonNotifier
from hostpanel.domain.protocols.event_bus_protocol import EventBusProtocol
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol
from hostpanel.domain.protocols.password_hashing_protocol import PasswordHashingProtocol


class CheckCredentials:
    """Resolve the identity from submitted credentials.

    Attributes:
        PRIORITY: Registration priority in the DURING phase.
    """

    PRIORITY = 99

    def __init__(
        self,
        credential_store: CredentialStore,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
        *,
        event_bus: EventBusProtocol | None = None,
        daemon_notifier: DaemonNotifier | None = None,
    ) -> None:
        """Initialize the listener.

        Args:
            credential_store: Account lookup and hash update.
            password_service: Multi-format verification and bcrypt hashing.
            logger: Structured logger.
            event_bus: Receives PasswordHashUpgraded after a rehash.
            daemon_notifier: Notified after the rehash of a customer account.
        """
        self._credential_store = credential_store
        self._password_service = password_service
        self._logger = logger
        self._event_bus = event_bus
        self._daemon_notifier = daemon_notifier

    def handle(self, event: AuthEvent) -> Decision:
        if event.result is not None and not event.result.is_valid:
            return NO_OPINION

        username = normalize_username(event.credentials.username)
        password = event.credentials.password

        if not username or not password:
            return self._invalid()

        identity = self._credential_store.find_by_username(username)
        if identity is None:
            self._logger.info("sign_in_unknown_username", username=username)
            return self._invalid()

        if not self._password_service.verify_password(password, identity.password_hash):
            self._logger.info(
                "sign_in_password_mismatch",
                user_id=identity.user_id,
                username=identity.username,
            )
            return self._invalid()

        result = AuthResult.success(identity.without_password())

        if not self._password_service.needs_rehash(identity.password_hash):
            return SetResult(result=result)

        rehash = RehashPassword(
            identity=identity,
            password=password,
            previous_algorithm=self._password_service.identify_hash(identity.password_hash),
            credential_store=self._credential_store,
            password_service=self._password_service,
            logger=self._logger,
            event_bus=self._event_bus,
            daemon_notifier=self._daemon_notifier,
        )
        return SetResult(result=result, post_success=rehash)

    @staticmethod
    def _invalid() -> SetResult:
        return SetResult(
            result=AuthResult.failure(
                AuthResultCode.FAILURE_CREDENTIAL_INVALID,
                AuthMessage.INVALID_CREDENTIALS,
            )
        )
