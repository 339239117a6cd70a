"""Infrastructure dependency factories.

Application-scoped singletons (cached with lru_cache):
- Logging (structlog console adapter)
- Database (SQLAlchemy engine and session factory)
- Password hashing (bcrypt with legacy verification)
- Redis client (shared connection pool)

Request-scoped factories (new instance per call):
- Config provider (``config`` table rows are cached per instance)
- Daemon notifier (sends at most once per instance)
- Session store (bound to one browser session)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from hostpanel.core.config import get_settings
from hostpanel.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from redis import Redis

    from hostpanel.domain.protocols.config_provider import ConfigProvider
    from hostpanel.domain.protocols.daemon_notifier import DaemonNotifier
    from hostpanel.domain.protocols.logger_protocol import LoggerProtocol
    from hostpanel.domain.protocols.password_hashing_protocol import (
        PasswordHashingProtocol,
    )
    from hostpanel.domain.protocols.session_store import SessionStore


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Human-readable console output in development, JSON everywhere else.

    Returns:
        Logger implementing LoggerProtocol.
    """
    from hostpanel.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager instance.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns:
        PasswordService using the configured bcrypt cost factor.
    """
    from hostpanel.infrastructure.security.password_service import PasswordService

    return PasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_redis() -> "Redis":
    """Get Redis client singleton (app-scoped).

    Returns:
        Synchronous Redis client with its own connection pool.
    """
    from redis import Redis

    return Redis.from_url(
        get_settings().redis_url,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )


# ============================================================================
# Request-Scoped Dependencies
# ============================================================================


def get_config_provider() -> "ConfigProvider":
    """Create a config provider (request-scoped).

    Returns correct adapter based on CONFIG_BACKEND:
        - 'database': DatabaseConfigProvider (``config`` rows over Settings)
        - 'settings': SettingsConfigProvider (environment only)

    Raises:
        ValueError: If CONFIG_BACKEND is unsupported.
    """
    settings = get_settings()

    if settings.config_backend == "database":
        from hostpanel.infrastructure.config.database_config_provider import (
            DatabaseConfigProvider,
        )

        return DatabaseConfigProvider(get_database(), settings, get_logger())

    elif settings.config_backend == "settings":
        from hostpanel.infrastructure.config.settings_config_provider import (
            SettingsConfigProvider,
        )

        return SettingsConfigProvider(settings)

    else:
        raise ValueError(
            f"Unsupported CONFIG_BACKEND: {settings.config_backend}. "
            "Supported: 'database', 'settings'"
        )


def get_daemon_notifier(config: "ConfigProvider | None" = None) -> "DaemonNotifier":
    """Create a backend daemon notifier (request-scoped).

    DAEMON_TYPE is read through ``config`` when given, so administrators can
    disable the daemon at runtime.

    Args:
        config: Optional runtime configuration.

    Returns:
        SocketDaemonNotifier for 'socket', NullDaemonNotifier otherwise.
    """
    from hostpanel.domain.enums import ConfigKey
    from hostpanel.infrastructure.daemon import NullDaemonNotifier, SocketDaemonNotifier

    settings = get_settings()
    daemon_type = (
        config.get(ConfigKey.DAEMON_TYPE, settings.daemon_type)
        if config is not None
        else settings.daemon_type
    )

    if str(daemon_type).lower() != "socket":
        return NullDaemonNotifier()

    return SocketDaemonNotifier(
        get_logger(),
        version=settings.app_version,
        host=settings.daemon_host,
        port=settings.daemon_port,
        timeout=settings.daemon_timeout,
    )


def get_session_store(session_id: str | None = None) -> "SessionStore":
    """Create the identity store of one browser session (request-scoped).

    Args:
        session_id: Browser session identifier (required for redis).

    Raises:
        ValueError: If SESSION_BACKEND is unsupported, or redis is selected
            without a session_id.
    """
    settings = get_settings()

    if settings.session_backend == "memory":
        from hostpanel.infrastructure.session import InMemorySessionStore

        return InMemorySessionStore()

    elif settings.session_backend == "redis":
        from hostpanel.infrastructure.session import RedisSessionStore

        if not session_id:
            raise ValueError("The redis session backend requires a session_id")
        return RedisSessionStore(
            get_redis(),
            session_id,
            get_logger(),
            ttl=settings.session_timeout,
        )

    else:
        raise ValueError(
            f"Unsupported SESSION_BACKEND: {settings.session_backend}. "
            "Supported: 'memory', 'redis'"
        )
