"""Authentication service factory.

Wires the default listener set into a fresh registry:

    Phase    Priority  Listener
    BEFORE   100       BruteForceGuard (only when BRUTEFORCE is enabled)
    DURING    99       CheckCredentials
    AFTER     99       CheckMaintenanceMode
    AFTER     99       CheckCustomerAccount
    AFTER    -99       PasswordRecovery

Usage:
    messages = FlashMessenger()
    auth_service = build_authentication_service(
        get_session_store(session_id),
        page_messages=messages,
    )
    result = auth_service.sign_in(Credentials(username=..., password=...))
"""

from typing import TYPE_CHECKING

from hostpanel.application.auth import AuthenticationService, ListenerRegistry
from hostpanel.application.auth.listeners import (
    BruteForceGuard,
    CheckCredentials,
    CheckCustomerAccount,
    CheckMaintenanceMode,
    PasswordRecovery,
)
from hostpanel.core.container.events import new_event_bus
from hostpanel.core.container.infrastructure import (
    get_config_provider,
    get_daemon_notifier,
    get_database,
    get_logger,
    get_password_service,
)
from hostpanel.domain.enums import AuthPhase, ConfigKey
from hostpanel.infrastructure.persistence.repositories import (
    SqlAccountStatusStore,
    SqlCredentialStore,
    SqlLoginAttemptStore,
)

if TYPE_CHECKING:
    from hostpanel.domain.protocols import (
        AccountStatusStore,
        ConfigProvider,
        CredentialStore,
        DaemonNotifier,
        EventBusProtocol,
        LoginAttemptStore,
        PageMessageProtocol,
        SessionStore,
    )


def build_authentication_service(
    session_store: "SessionStore",
    *,
    page_messages: "PageMessageProtocol",
    event_bus: "EventBusProtocol | None" = None,
    config: "ConfigProvider | None" = None,
    credential_store: "CredentialStore | None" = None,
    account_status_store: "AccountStatusStore | None" = None,
    attempt_store: "LoginAttemptStore | None" = None,
    daemon_notifier: "DaemonNotifier | None" = None,
) -> AuthenticationService:
    """Create a request-scoped AuthenticationService with default listeners.

    Every collaborator can be overridden; missing ones come from the
    container (SQL stores on the shared database, a new event bus).

    Args:
        session_store: Identity storage of the current browser session.
        page_messages: Flash messages of the current request.
        event_bus: Request event bus. Defaults to a new bus.
        config: Runtime configuration. Defaults to get_config_provider().
        credential_store: Account lookup. Defaults to SqlCredentialStore.
        account_status_store: Customer account state. Defaults to
            SqlAccountStatusStore.
        attempt_store: Brute-force counters. Defaults to SqlLoginAttemptStore.
        daemon_notifier: Backend notifier. Defaults to get_daemon_notifier().

    Returns:
        AuthenticationService ready for sign_in().
    """
    logger = get_logger()
    event_bus = event_bus if event_bus is not None else new_event_bus()
    config = config if config is not None else get_config_provider()

    if credential_store is None or account_status_store is None or attempt_store is None:
        database = get_database()
        credential_store = credential_store or SqlCredentialStore(database)
        account_status_store = account_status_store or SqlAccountStatusStore(database)
        attempt_store = attempt_store or SqlLoginAttemptStore(database)

    if daemon_notifier is None:
        daemon_notifier = get_daemon_notifier(config)

    registry = ListenerRegistry(logger=logger)

    if config.get(ConfigKey.BRUTEFORCE, False):
        registry.register(
            AuthPhase.BEFORE,
            BruteForceGuard(attempt_store, config, logger),
            priority=BruteForceGuard.PRIORITY,
        )

    registry.register(
        AuthPhase.DURING,
        CheckCredentials(
            credential_store,
            get_password_service(),
            logger,
            event_bus=event_bus,
            daemon_notifier=daemon_notifier,
        ),
        priority=CheckCredentials.PRIORITY,
    )
    registry.register(
        AuthPhase.AFTER,
        CheckMaintenanceMode(config, logger),
        priority=CheckMaintenanceMode.PRIORITY,
    )
    registry.register(
        AuthPhase.AFTER,
        CheckCustomerAccount(account_status_store, logger),
        priority=CheckCustomerAccount.PRIORITY,
    )
    registry.register(
        AuthPhase.AFTER,
        PasswordRecovery(config, event_bus, page_messages),
        priority=PasswordRecovery.PRIORITY,
    )

    return AuthenticationService(
        registry,
        session_store,
        logger,
        event_bus=event_bus,
        config=config,
        credential_store=credential_store,
    )
