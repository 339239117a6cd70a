"""End-to-end sign-in against SQLite with the default listener set.

Covers the legacy hash upgrade path: a customer signing in with an apr1 hash
gets a bcrypt hash, the account is flagged for the backend daemon and the
daemon is notified once.
"""

from unittest.mock import Mock, patch

import pytest
from passlib.hash import apr_md5_crypt

from hostpanel.application.auth import Credentials
from hostpanel.core.config import Settings
from hostpanel.core.container import build_authentication_service
from hostpanel.domain.enums import AuthResultCode, HashAlgorithm
from hostpanel.domain.errors import AuthMessage
from hostpanel.infrastructure.config import DatabaseConfigProvider
from hostpanel.infrastructure.persistence.repositories import (
    SqlAccountStatusStore,
    SqlCredentialStore,
    SqlLoginAttemptStore,
)
from hostpanel.infrastructure.security.password_service import PasswordService


@pytest.mark.integration
class TestSignInFlow:
    """Test AuthenticationService.sign_in wired by the container."""

    @pytest.fixture
    def daemon_notifier(self):
        return Mock(notify=Mock(return_value=True))

    @pytest.fixture
    def build(self, database, mock_logger, event_bus, flash_messenger, daemon_notifier):
        config = DatabaseConfigProvider(database, Settings(bruteforce=True), mock_logger)

        def _build(session_store):
            with (
                patch("hostpanel.core.container.auth.get_logger", return_value=mock_logger),
                patch(
                    "hostpanel.core.container.auth.get_password_service",
                    return_value=PasswordService(cost_factor=10),
                ),
            ):
                return build_authentication_service(
                    session_store,
                    page_messages=flash_messenger,
                    event_bus=event_bus,
                    config=config,
                    credential_store=SqlCredentialStore(database),
                    account_status_store=SqlAccountStatusStore(database),
                    attempt_store=SqlLoginAttemptStore(database),
                    daemon_notifier=daemon_notifier,
                )

        return _build

    def test_legacy_hash_is_upgraded(
        self, database, add_user, build, session_store, daemon_notifier
    ):
        # Arrange
        user_id = add_user("bob", apr_md5_crypt.hash("s3cret"), created_by=2, enabled=True)
        service = build(session_store)

        # Act
        result = service.sign_in(
            Credentials(username="Bob", password="s3cret", client_ip="192.0.2.10")
        )

        # Assert
        assert result.code is AuthResultCode.SUCCESS
        assert session_store.read().user_id == user_id

        stored = SqlCredentialStore(database).find_by_id(user_id)
        password_service = PasswordService(cost_factor=10)
        assert password_service.identify_hash(stored.password_hash) is HashAlgorithm.BCRYPT
        assert password_service.verify_password("s3cret", stored.password_hash)
        daemon_notifier.notify.assert_called_once_with()

        attempt = SqlLoginAttemptStore(database).find_by_ip("192.0.2.10")
        assert attempt.login_count == 1

    def test_suspended_customer_keeps_legacy_hash(
        self, database, add_user, build, session_store, daemon_notifier
    ):
        # Arrange
        legacy_hash = apr_md5_crypt.hash("s3cret")
        user_id = add_user("bob", legacy_hash, created_by=2, enabled=False)
        service = build(session_store)

        # Act
        result = service.sign_in(Credentials(username="bob", password="s3cret"))

        # Assert
        assert result.code is AuthResultCode.FAILURE_UNCATEGORIZED
        assert result.messages == (AuthMessage.ACCOUNT_SUSPENDED,)
        assert session_store.is_empty()
        assert SqlCredentialStore(database).find_by_id(user_id).password_hash == legacy_hash
        daemon_notifier.notify.assert_not_called()

    def test_mixed_case_stored_username_signs_in(
        self, database, add_user, build, session_store, daemon_notifier
    ):
        # Arrange
        password_hash = PasswordService(cost_factor=10).hash_password("s3cret")
        user_id = add_user("Reseller.Bob", password_hash, user_type="reseller", created_by=1)
        service = build(session_store)

        # Act
        result = service.sign_in(Credentials(username="reseller.bob", password="s3cret"))

        # Assert
        assert result.code is AuthResultCode.SUCCESS
        assert result.identity.user_id == user_id
        daemon_notifier.notify.assert_not_called()
