"""ConfigProvider protocol (port) for runtime configuration."""

from typing import Any, Protocol

from hostpanel.domain.enums import ConfigKey


class ConfigProvider(Protocol):
    """Key/value access to panel configuration.

    Implementations:
        - SettingsConfigProvider: environment-backed Settings
        - DatabaseConfigProvider: ``config`` table, falling back to Settings
    """

    def get(self, key: ConfigKey | str, default: Any = None) -> Any:
        """Return the value of ``key``.

        Args:
            key: ConfigKey member or its name.
            default: Returned when the key is unknown.

        Returns:
            Typed configuration value (bool, int, str).
        """
        ...
