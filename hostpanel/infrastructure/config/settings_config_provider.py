"""ConfigProvider backed by environment Settings."""

from typing import Any

from hostpanel.core.config import Settings
from hostpanel.domain.enums import ConfigKey


def settings_field_name(key: ConfigKey | str) -> str:
    """Map a configuration key to its Settings attribute name.

    Args:
        key: ConfigKey member or key name in any case.

    Returns:
        str: Lower-case attribute name.
    """
    if isinstance(key, ConfigKey):
        return key.settings_field
    return key.strip().lower()


class SettingsConfigProvider:
    """Read configuration straight from a Settings instance.

    Used when the panel runs without a ``config`` table (CLI tools, tests).

    Example:
        >>> provider = SettingsConfigProvider(Settings(maintenance_mode=True))
        >>> provider.get(ConfigKey.MAINTENANCE_MODE)
        True
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def get(self, key: ConfigKey | str, default: Any = None) -> Any:
        """Return the Settings value of ``key``, or ``default`` if unknown."""
        return getattr(self._settings, settings_field_name(key), default)
