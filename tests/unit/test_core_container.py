"""Unit tests for the dependency container.

Tests cover:
- Backend selection of the request-scoped factories
- Default listener wiring of build_authentication_service
- Request-scoped event buses
"""

from unittest.mock import Mock, patch

import pytest

from hostpanel.application.auth.listeners import (
    BruteForceGuard,
    CheckCredentials,
    CheckCustomerAccount,
    CheckMaintenanceMode,
    PasswordRecovery,
)
from hostpanel.core.config import Settings
from hostpanel.core.container import (
    build_authentication_service,
    get_config_provider,
    get_daemon_notifier,
    get_session_store,
    new_event_bus,
)
from hostpanel.domain.enums import AuthPhase
from hostpanel.domain.events import UserSignInFailed
from hostpanel.infrastructure.config import (
    DatabaseConfigProvider,
    SettingsConfigProvider,
)
from hostpanel.infrastructure.daemon import NullDaemonNotifier, SocketDaemonNotifier
from hostpanel.infrastructure.session import InMemorySessionStore, RedisSessionStore
from tests.conftest import (
    FakeAccountStatusStore,
    FakeConfig,
    FakeCredentialStore,
    FakeLoginAttemptStore,
)

INFRA = "hostpanel.core.container.infrastructure"


@pytest.fixture
def use_settings(mock_logger):
    """Patch the container to read the given Settings and a mock logger."""
    patchers = []

    def _apply(**values):
        patchers.extend(
            [
                patch(f"{INFRA}.get_settings", return_value=Settings(**values)),
                patch(f"{INFRA}.get_logger", return_value=mock_logger),
            ]
        )
        for patcher in patchers:
            patcher.start()

    yield _apply
    for patcher in patchers:
        patcher.stop()


@pytest.mark.unit
class TestGetConfigProvider:
    """Test CONFIG_BACKEND selection."""

    def test_settings_backend(self, use_settings):
        use_settings(config_backend="settings")

        assert isinstance(get_config_provider(), SettingsConfigProvider)

    def test_database_backend(self, use_settings):
        use_settings(config_backend="database")

        with patch(f"{INFRA}.get_database", return_value=Mock()):
            provider = get_config_provider()

        assert isinstance(provider, DatabaseConfigProvider)

    def test_unsupported_backend(self, use_settings):
        use_settings(config_backend="ldap")

        with pytest.raises(ValueError, match="Unsupported CONFIG_BACKEND"):
            get_config_provider()


@pytest.mark.unit
class TestGetDaemonNotifier:
    """Test DAEMON_TYPE selection."""

    def test_socket_from_settings(self, use_settings):
        use_settings(daemon_type="socket", daemon_port=7000)

        notifier = get_daemon_notifier()

        assert isinstance(notifier, SocketDaemonNotifier)
        assert notifier.sent is False

    def test_runtime_config_disables_daemon(self, use_settings):
        use_settings(daemon_type="socket")

        notifier = get_daemon_notifier(FakeConfig(daemon_type="none"))

        assert isinstance(notifier, NullDaemonNotifier)


@pytest.mark.unit
class TestGetSessionStore:
    """Test SESSION_BACKEND selection."""

    def test_memory_backend(self, use_settings):
        use_settings(session_backend="memory")

        assert isinstance(get_session_store(), InMemorySessionStore)

    def test_redis_backend(self, use_settings):
        use_settings(session_backend="redis", session_timeout=600)

        with patch(f"{INFRA}.get_redis", return_value=Mock()):
            store = get_session_store("abc123")

        assert isinstance(store, RedisSessionStore)
        assert store.key == "hostpanel:session:abc123:identity"

    def test_redis_backend_requires_session_id(self, use_settings):
        use_settings(session_backend="redis")

        with pytest.raises(ValueError, match="session_id"):
            get_session_store()

    def test_unsupported_backend(self, use_settings):
        use_settings(session_backend="file")

        with pytest.raises(ValueError, match="Unsupported SESSION_BACKEND"):
            get_session_store()


@pytest.mark.unit
class TestBuildAuthenticationService:
    """Test default listener wiring."""

    @pytest.fixture(autouse=True)
    def patch_singletons(self, mock_logger):
        with (
            patch("hostpanel.core.container.auth.get_logger", return_value=mock_logger),
            patch(
                "hostpanel.core.container.auth.get_password_service",
                return_value=Mock(),
            ),
        ):
            yield

    def _build(self, config, session_store, flash_messenger):
        return build_authentication_service(
            session_store,
            page_messages=flash_messenger,
            event_bus=Mock(),
            config=config,
            credential_store=FakeCredentialStore(),
            account_status_store=FakeAccountStatusStore(),
            attempt_store=FakeLoginAttemptStore(),
            daemon_notifier=NullDaemonNotifier(),
        )

    def test_listener_order(self, session_store, flash_messenger):
        # Act
        service = self._build(FakeConfig(bruteforce=True), session_store, flash_messenger)

        # Assert
        registry = service.registry
        assert [type(h) for h in registry.listeners(AuthPhase.BEFORE)] == [
            BruteForceGuard
        ]
        assert [type(h) for h in registry.listeners(AuthPhase.DURING)] == [
            CheckCredentials
        ]
        assert [type(h) for h in registry.listeners(AuthPhase.AFTER)] == [
            CheckMaintenanceMode,
            CheckCustomerAccount,
            PasswordRecovery,
        ]

    def test_brute_force_guard_only_when_enabled(self, session_store, flash_messenger):
        service = self._build(FakeConfig(bruteforce=False), session_store, flash_messenger)

        assert service.registry.listeners(AuthPhase.BEFORE) == ()


@pytest.mark.unit
class TestNewEventBus:
    """Test request-scoped event buses."""

    def test_buses_are_independent_and_log_outcomes(self, mock_logger):
        # Arrange
        with patch(f"{INFRA}.get_logger", return_value=mock_logger):
            first = new_event_bus()
            second = new_event_bus()

        # Act
        first.publish(UserSignInFailed(username="bob", reason="failure_credential_invalid"))

        # Assert
        assert first is not second
        assert mock_logger.warning.call_args.args == ("user_sign_in_failed",)
        assert mock_logger.warning.call_args.kwargs["username"] == "bob"
