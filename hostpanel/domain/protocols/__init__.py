"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, entities) to avoid
circular import risks.

Usage:
    from hostpanel.domain.protocols import CredentialStore, SessionStore
"""

from hostpanel.domain.protocols.account_status_store import AccountStatusStore
from hostpanel.domain.protocols.config_provider import ConfigProvider
from hostpanel.domain.protocols.credential_store import CredentialStore
from hostpanel.domain.protocols.daemon_notifier import DaemonNotifier
from hostpanel.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol
from hostpanel.domain.protocols.login_attempt_store import LoginAttemptStore
from hostpanel.domain.protocols.page_message_protocol import PageMessageProtocol
from hostpanel.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from hostpanel.domain.protocols.session_store import SessionStore

__all__ = [
    "AccountStatusStore",
    "ConfigProvider",
    "CredentialStore",
    "DaemonNotifier",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "LoginAttemptStore",
    "PageMessageProtocol",
    "PasswordHashingProtocol",
    "SessionStore",
]
