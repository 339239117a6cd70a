"""Deferred password hash upgrade.

Created by CheckCredentials when the stored hash uses a legacy format, and run
by the AuthenticationService only if the final result of the attempt is
valid. A sign-in denied by an after-authentication gate (suspended account,
maintenance mode) therefore never rewrites the stored hash.
"""

from hostpanel.application.auth.auth_result import AuthResult
from hostpanel.domain.entities.identity import Identity
from hostpanel.domain.enums import HashAlgorithm, UserType
from hostpanel.domain.events import PasswordHashUpgraded
from hostpanel.domain.protocols.credential_store import CredentialStore
from hostpanel.domain.protocols.daemon_notifier import DaemonNotifier
from hostpanel.domain.protocols.event_bus_protocol import EventBusProtocol
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol
from hostpanel.domain.protocols.password_hashing_protocol import PasswordHashingProtocol

# Account status asking the backend daemon to propagate the new password
STATUS_TO_CHANGE_PASSWORD = "tochangepwd"
STATUS_OK = "ok"


class RehashPassword:
    """One-shot post-success action replacing a legacy hash with bcrypt.

    Customer passwords are also used by backend services (FTP, mail), so the
    account is flagged for the backend daemon, which is then notified.

    The action runs at most once, and only for a valid final result whose
    identity is the account it was created for.
    """

    def __init__(
        self,
        *,
        identity: Identity,
        password: str,
        previous_algorithm: HashAlgorithm,
        credential_store: CredentialStore,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
        event_bus: EventBusProtocol | None = None,
        daemon_notifier: DaemonNotifier | None = None,
    ) -> None:
        self._user_id = identity.user_id
        self._username = identity.username
        self._user_type = identity.user_type
        self._password = password
        self._previous_algorithm = previous_algorithm
        self._credential_store = credential_store
        self._password_service = password_service
        self._logger = logger
        self._event_bus = event_bus
        self._daemon_notifier = daemon_notifier
        self._done = False

    def __repr__(self) -> str:
        return f"RehashPassword(user_id={self._user_id}, previous_algorithm={self._previous_algorithm.value})"

    def __call__(self, result: AuthResult) -> None:
        if self._done:
            return
        if not result.is_valid or result.identity is None or result.identity.user_id != self._user_id:
            self._logger.debug("password_rehash_skipped", user_id=self._user_id)
            return

        self._done = True
        new_hash = self._password_service.hash_password(self._password)
        is_customer = self._user_type is UserType.USER
        status = STATUS_TO_CHANGE_PASSWORD if is_customer else STATUS_OK
        self._credential_store.update_password_hash(self._user_id, new_hash, status)

        self._logger.info(
            "password_hash_upgraded",
            user_id=self._user_id,
            username=self._username,
            previous_algorithm=self._previous_algorithm.value,
        )

        if self._event_bus is not None:
            self._event_bus.publish(
                PasswordHashUpgraded(
                    user_id=self._user_id,
                    username=self._username,
                    previous_algorithm=self._previous_algorithm.value,
                )
            )

        if is_customer and self._daemon_notifier is not None:
            self._daemon_notifier.notify()
