"""Shared pytest configuration, fakes and fixtures.

The fakes implement the domain store protocols in memory. They are plain
classes (structural typing), recording the calls tests assert on.
"""

from typing import Any
from unittest.mock import Mock

import pytest

from hostpanel.application.auth import ListenerRegistry
from hostpanel.domain.entities.account_status import AccountStatus
from hostpanel.domain.entities.identity import Identity
from hostpanel.domain.entities.login_attempt import LoginAttempt
from hostpanel.domain.enums import ConfigKey, UserType
from hostpanel.infrastructure.events import InMemoryEventBus
from hostpanel.infrastructure.session import InMemorySessionStore
from hostpanel.infrastructure.ui import FlashMessenger


# =============================================================================
# Test helpers
# =============================================================================


def create_identity(
    user_id: int = 1,
    username: str = "bob",
    user_type: UserType = UserType.USER,
    password_hash: str = "",
    created_by: int = 2,
) -> Identity:
    """Helper to create an Identity for testing.

    Args:
        user_id: Account identifier (default: 1).
        username: Login name (default: bob).
        user_type: Account type (default: ordinary user).
        password_hash: Stored hash (default: none).
        created_by: Owning account (default: reseller 2).
    """
    return Identity(
        user_id=user_id,
        username=username,
        user_type=user_type,
        password_hash=password_hash,
        email=f"{username}@example.com",
        created_by=created_by,
    )


# =============================================================================
# Fakes
# =============================================================================


class FakeCredentialStore:
    """CredentialStore keeping accounts in a dict keyed by user_id."""

    def __init__(self, *identities: Identity) -> None:
        self.accounts: dict[int, Identity] = {i.user_id: i for i in identities}
        self.statuses: dict[int, str] = {}
        self.lookups: list[str] = []
        self.updates: list[tuple[int, str, str]] = []

    def find_by_username(self, username: str) -> Identity | None:
        self.lookups.append(username)
        for identity in self.accounts.values():
            if identity.username == username:
                return identity
        return None

    def find_by_id(self, user_id: int) -> Identity | None:
        return self.accounts.get(user_id)

    def update_password_hash(self, user_id: int, new_hash: str, new_status: str) -> None:
        self.updates.append((user_id, new_hash, new_status))
        current = self.accounts[user_id]
        self.accounts[user_id] = Identity(
            user_id=current.user_id,
            username=current.username,
            user_type=current.user_type,
            password_hash=new_hash,
            email=current.email,
            created_by=current.created_by,
        )
        self.statuses[user_id] = new_status


class FakeAccountStatusStore:
    """AccountStatusStore backed by a dict."""

    def __init__(self, statuses: dict[int, AccountStatus] | None = None) -> None:
        self.statuses = statuses or {}

    def get_status(self, user_id: int) -> AccountStatus | None:
        return self.statuses.get(user_id)


class FakeConfig:
    """ConfigProvider backed by a dict keyed by ConfigKey."""

    def __init__(self, **values: Any) -> None:
        self.values: dict[str, Any] = {k.upper(): v for k, v in values.items()}

    def get(self, key: ConfigKey | str, default: Any = None) -> Any:
        name = key.value if isinstance(key, ConfigKey) else key.upper()
        return self.values.get(name, default)


class FakeLoginAttemptStore:
    """LoginAttemptStore backed by a dict keyed by IP address."""

    def __init__(self, *attempts: LoginAttempt) -> None:
        self.attempts: dict[str, LoginAttempt] = {a.ip_address: a for a in attempts}

    def find_by_ip(self, ip_address: str) -> LoginAttempt | None:
        return self.attempts.get(ip_address)

    def create(self, ip_address: str, session_id: str | None, now: int) -> None:
        self.attempts[ip_address] = LoginAttempt(
            ip_address=ip_address,
            session_id=session_id,
            login_count=1,
            last_access=now,
        )

    def increment(self, ip_address: str, now: int) -> None:
        current = self.attempts[ip_address]
        self.attempts[ip_address] = LoginAttempt(
            ip_address=ip_address,
            session_id=current.session_id,
            login_count=current.login_count + 1,
            last_access=now,
        )

    def purge_before(self, timestamp: int) -> int:
        stale = [ip for ip, a in self.attempts.items() if a.last_access < timestamp]
        for ip in stale:
            del self.attempts[ip]
        return len(stale)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Mock logger implementing LoggerProtocol."""
    return Mock()


@pytest.fixture
def registry(mock_logger):
    return ListenerRegistry(logger=mock_logger)


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def event_bus(mock_logger):
    return InMemoryEventBus(logger=mock_logger)


@pytest.fixture
def flash_messenger():
    return FlashMessenger()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
