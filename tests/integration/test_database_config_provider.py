"""Integration tests for DatabaseConfigProvider."""

import pytest

from hostpanel.core.config import Settings
from hostpanel.domain.enums import ConfigKey
from hostpanel.infrastructure.config import DatabaseConfigProvider
from hostpanel.infrastructure.persistence.models import ConfigModel


@pytest.mark.integration
class TestDatabaseConfigProvider:
    """Test ``config`` rows layered over Settings."""

    @pytest.fixture
    def provider(self, database, mock_logger):
        return DatabaseConfigProvider(
            database,
            Settings(bruteforce_max_login=3, maintenance_mode=False),
            mock_logger,
        )

    def _insert(self, database, name, value):
        with database.get_session() as session:
            session.add(ConfigModel(name=name, value=value))

    def test_falls_back_to_settings(self, provider):
        assert provider.get(ConfigKey.BRUTEFORCE_MAX_LOGIN) == 3
        assert provider.get("UNKNOWN_KEY", "default") == "default"

    def test_rows_are_coerced_to_settings_types(self, database, provider):
        # Arrange
        self._insert(database, "MAINTENANCE_MODE", "1")
        self._insert(database, "BRUTEFORCE_MAX_LOGIN", "5")

        # Act / Assert
        assert provider.get(ConfigKey.MAINTENANCE_MODE) is True
        assert provider.get(ConfigKey.BRUTEFORCE_MAX_LOGIN) == 5

    def test_invalid_row_is_logged_and_ignored(self, database, provider, mock_logger):
        # Arrange
        self._insert(database, "BRUTEFORCE_MAX_LOGIN", "many")

        # Act
        value = provider.get(ConfigKey.BRUTEFORCE_MAX_LOGIN)

        # Assert
        assert value == 3
        mock_logger.warning.assert_called_once_with(
            "config_value_invalid",
            key="BRUTEFORCE_MAX_LOGIN",
            value="many",
        )

    def test_set_updates_row_and_cache(self, database, provider):
        # Arrange
        provider.get(ConfigKey.MAINTENANCE_MODE)

        # Act
        provider.set(ConfigKey.MAINTENANCE_MODE, True)
        provider.set(ConfigKey.MAINTENANCE_MODE, False)

        # Assert
        assert provider.get(ConfigKey.MAINTENANCE_MODE) is False
        with database.get_session() as session:
            rows = session.query(ConfigModel).all()
            assert [(r.name, r.value) for r in rows] == [("MAINTENANCE_MODE", "0")]

    def test_rows_are_cached_until_reload(self, database, provider):
        # Arrange
        assert provider.get(ConfigKey.MAINTENANCE_MODE) is False
        self._insert(database, "MAINTENANCE_MODE", "true")

        # Act / Assert
        assert provider.get(ConfigKey.MAINTENANCE_MODE) is False
        provider.reload()
        assert provider.get(ConfigKey.MAINTENANCE_MODE) is True
