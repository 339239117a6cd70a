"""Configuration keys read through ConfigProvider.

Names match the ``name`` column of the ``config`` table. Each key maps to the
Settings field of the same name in lower case, which supplies its type and
default value.
"""

from enum import Enum


class ConfigKey(str, Enum):
    """Configuration keys consumed by the authentication pipeline."""

    MAINTENANCE_MODE = "MAINTENANCE_MODE"
    MAINTENANCE_MESSAGE = "MAINTENANCE_MESSAGE"
    LOST_PASSWORD_ENABLED = "LOST_PASSWORD_ENABLED"
    MIN_PASSWORD_LENGTH = "MIN_PASSWORD_LENGTH"
    PREVENT_EXTERNAL_LOGIN = "PREVENT_EXTERNAL_LOGIN"

    BRUTEFORCE = "BRUTEFORCE"
    BRUTEFORCE_MAX_LOGIN = "BRUTEFORCE_MAX_LOGIN"
    BRUTEFORCE_BLOCK_TIME = "BRUTEFORCE_BLOCK_TIME"
    BRUTEFORCE_BETWEEN = "BRUTEFORCE_BETWEEN"
    BRUTEFORCE_MAX_ATTEMPTS_BEFORE_WAIT = "BRUTEFORCE_MAX_ATTEMPTS_BEFORE_WAIT"
    BRUTEFORCE_BETWEEN_TIME = "BRUTEFORCE_BETWEEN_TIME"

    DAEMON_TYPE = "DAEMON_TYPE"
    APP_VERSION = "APP_VERSION"

    @property
    def settings_field(self) -> str:
        """Name of the matching Settings attribute."""
        return self.value.lower()
