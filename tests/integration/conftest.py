"""Integration fixtures: a fresh in-memory SQLite database per test."""

import pytest

from hostpanel.infrastructure.persistence import Database
from hostpanel.infrastructure.persistence.models import (
    CustomerAccountModel,
    UserModel,
)


@pytest.fixture
def database():
    """Database with all tables created, disposed after the test."""
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.drop_all()
    db.close()


@pytest.fixture
def add_user(database):
    """Insert a panel account and return its id."""

    def _add(
        username: str,
        password_hash: str,
        user_type: str = "user",
        created_by: int = 0,
        enabled: bool | None = None,
        expires_at: int = 0,
    ) -> int:
        with database.get_session() as session:
            user = UserModel(
                username=username,
                password_hash=password_hash,
                user_type=user_type,
                email=f"{username}@example.com",
                created_by=created_by,
            )
            session.add(user)
            session.flush()
            if enabled is not None:
                session.add(
                    CustomerAccountModel(
                        user_id=user.id,
                        enabled=enabled,
                        expires_at=expires_at,
                    )
                )
            return user.id

    return _add
