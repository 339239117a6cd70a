"""ConfigProvider adapters."""

from hostpanel.infrastructure.config.database_config_provider import (
    DatabaseConfigProvider,
)
from hostpanel.infrastructure.config.settings_config_provider import (
    SettingsConfigProvider,
)

__all__ = ["DatabaseConfigProvider", "SettingsConfigProvider"]
