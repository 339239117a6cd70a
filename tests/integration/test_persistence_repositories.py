"""Integration tests for the SQL store adapters.

Tests cover:
- SqlCredentialStore: lookups, hash updates
- SqlAccountStatusStore: customer account state
- SqlLoginAttemptStore: create, increment, purge
"""

import pytest
from sqlalchemy import select

from hostpanel.domain.enums import UserType
from hostpanel.infrastructure.persistence.models import UserModel
from hostpanel.infrastructure.persistence.repositories import (
    SqlAccountStatusStore,
    SqlCredentialStore,
    SqlLoginAttemptStore,
)


@pytest.mark.integration
class TestSqlCredentialStore:
    """Test account lookups against SQLite."""

    def test_find_by_username(self, database, add_user):
        # Arrange
        user_id = add_user("reseller1", "$2b$10$hash", user_type="reseller", created_by=1)
        store = SqlCredentialStore(database)

        # Act
        identity = store.find_by_username("reseller1")

        # Assert
        assert identity is not None
        assert identity.user_id == user_id
        assert identity.user_type is UserType.RESELLER
        assert identity.password_hash == "$2b$10$hash"
        assert identity.email == "reseller1@example.com"
        assert identity.created_by == 1

    def test_find_by_username_ignores_stored_case(self, database, add_user):
        """Test rows stored with capitals match the normalized username."""
        # Arrange
        user_id = add_user("Bob", "$2b$10$hash")

        # Act
        identity = SqlCredentialStore(database).find_by_username("bob")

        # Assert
        assert identity is not None
        assert identity.user_id == user_id

    def test_find_missing_account(self, database):
        store = SqlCredentialStore(database)

        assert store.find_by_username("nobody") is None
        assert store.find_by_id(404) is None

    def test_update_password_hash(self, database, add_user):
        # Arrange
        user_id = add_user("bob", "5f4dcc3b5aa765d61d8327deb882cf99")
        store = SqlCredentialStore(database)

        # Act
        store.update_password_hash(user_id, "$2b$10$new", "tochangepwd")

        # Assert
        assert store.find_by_id(user_id).password_hash == "$2b$10$new"
        with database.get_session() as session:
            status = session.execute(
                select(UserModel.status).where(UserModel.id == user_id)
            ).scalar_one()
        assert status == "tochangepwd"


@pytest.mark.integration
class TestSqlAccountStatusStore:
    """Test customer account state lookups."""

    def test_get_status(self, database, add_user):
        user_id = add_user("bob", "x", enabled=False, expires_at=1700000000)

        status = SqlAccountStatusStore(database).get_status(user_id)

        assert status is not None
        assert status.enabled is False
        assert status.expires_at == 1700000000

    def test_missing_customer_account(self, database, add_user):
        user_id = add_user("admin", "x", user_type="admin")

        assert SqlAccountStatusStore(database).get_status(user_id) is None


@pytest.mark.integration
class TestSqlLoginAttemptStore:
    """Test brute-force counters."""

    def test_create_and_increment(self, database):
        # Arrange
        store = SqlLoginAttemptStore(database)

        # Act
        store.create("192.0.2.10", "sess-1", 1000)
        store.increment("192.0.2.10", 1010)

        # Assert
        attempt = store.find_by_ip("192.0.2.10")
        assert attempt.login_count == 2
        assert attempt.last_access == 1010
        assert attempt.session_id == "sess-1"

    def test_create_after_concurrent_insert_counts_attempt(self, database):
        """Test a second first attempt from one IP adds to the existing record."""
        # Arrange
        store = SqlLoginAttemptStore(database)
        assert store.find_by_ip("192.0.2.1") is None
        assert store.find_by_ip("192.0.2.1") is None

        # Act
        store.create("192.0.2.1", "sess-1", 1000)
        store.create("192.0.2.1", "sess-2", 1005)

        # Assert
        attempt = store.find_by_ip("192.0.2.1")
        assert attempt.login_count == 2
        assert attempt.last_access == 1005

    def test_purge_before(self, database):
        # Arrange
        store = SqlLoginAttemptStore(database)
        store.create("192.0.2.10", None, 1000)
        store.create("192.0.2.11", None, 5000)

        # Act
        purged = store.purge_before(2000)

        # Assert
        assert purged == 1
        assert store.find_by_ip("192.0.2.10") is None
        assert store.find_by_ip("192.0.2.11") is not None


@pytest.mark.integration
class TestDatabase:
    """Test session handling of Database."""

    def test_check_connection(self, database):
        assert database.check_connection() is True

    def test_failed_block_is_rolled_back(self, database):
        # Act
        with pytest.raises(RuntimeError):
            with database.get_session() as session:
                session.add(UserModel(username="ghost", password_hash="x", user_type="user"))
                session.flush()
                raise RuntimeError("abort")

        # Assert
        assert SqlCredentialStore(database).find_by_username("ghost") is None
