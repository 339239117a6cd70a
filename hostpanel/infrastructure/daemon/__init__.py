"""DaemonNotifier adapters."""

from hostpanel.infrastructure.daemon.null_daemon_notifier import NullDaemonNotifier
from hostpanel.infrastructure.daemon.socket_daemon_notifier import (
    DaemonProtocolError,
    SocketDaemonNotifier,
)

__all__ = ["DaemonProtocolError", "NullDaemonNotifier", "SocketDaemonNotifier"]
