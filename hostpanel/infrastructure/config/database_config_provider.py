"""ConfigProvider backed by the ``config`` table.

Administrators change panel-wide switches (maintenance mode, brute-force
thresholds) at runtime through the ``config`` table. Values are stored as
text and coerced to the type of the matching Settings field with pydantic,
so "1", "true" and "yes" all read as True for boolean keys. Keys without a
row fall back to Settings.
"""

import threading
from typing import Any

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import select

from hostpanel.core.config import Settings
from hostpanel.domain.enums import ConfigKey
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol
from hostpanel.infrastructure.config.settings_config_provider import (
    settings_field_name,
)
from hostpanel.infrastructure.persistence.database import Database
from hostpanel.infrastructure.persistence.models.config import ConfigModel


class DatabaseConfigProvider:
    """Layered configuration: ``config`` table rows over Settings.

    Rows are loaded once and cached for the lifetime of the provider (one
    request in the panel). Call reload() to pick up changes.

    Attributes:
        database: Database providing sessions.
    """

    def __init__(
        self,
        database: Database,
        settings: Settings,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize provider.

        Args:
            database: Database connection manager.
            settings: Fallback values and type information.
            logger: Logger for values that fail coercion.
        """
        self.database = database
        self._settings = settings
        self._logger = logger
        self._rows: dict[str, str] | None = None
        self._lock = threading.Lock()

    def get(self, key: ConfigKey | str, default: Any = None) -> Any:
        """Return the value of ``key``.

        Lookup order: ``config`` row, Settings field, ``default``. A row whose
        value cannot be coerced to the Settings field type is ignored and
        logged.

        Args:
            key: ConfigKey member or key name in any case.
            default: Returned when neither a row nor a Settings field exists.

        Returns:
            Typed configuration value.
        """
        field = settings_field_name(key)
        fallback = getattr(self._settings, field, default)

        raw = self._load().get(field.upper())
        if raw is None:
            return fallback

        field_info = Settings.model_fields.get(field)
        if field_info is None or field_info.annotation is None:
            return raw

        try:
            return TypeAdapter(field_info.annotation).validate_python(raw)
        except ValidationError:
            self._logger.warning(
                "config_value_invalid",
                key=field.upper(),
                value=raw,
            )
            return fallback

    def set(self, key: ConfigKey | str, value: Any) -> None:
        """Create or replace the ``config`` row of ``key``.

        Booleans are stored as "1" or "0".

        Args:
            key: ConfigKey member or key name in any case.
            value: New value.
        """
        name = settings_field_name(key).upper()
        stored = ("1" if value else "0") if isinstance(value, bool) else str(value)

        with self.database.get_session() as session:
            row = session.execute(
                select(ConfigModel).where(ConfigModel.name == name)
            ).scalar_one_or_none()
            if row is None:
                session.add(ConfigModel(name=name, value=stored))
            else:
                row.value = stored

        with self._lock:
            if self._rows is not None:
                self._rows[name] = stored

    def reload(self) -> None:
        """Drop cached rows; the next get() reads the table again."""
        with self._lock:
            self._rows = None

    def _load(self) -> dict[str, str]:
        with self._lock:
            if self._rows is None:
                with self.database.get_session() as session:
                    rows = session.execute(select(ConfigModel)).scalars().all()
                    self._rows = {row.name.upper(): row.value for row in rows}
            return self._rows
