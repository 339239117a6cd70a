"""DaemonNotifier protocol (port) for the backend daemon."""

from typing import Protocol


class DaemonNotifier(Protocol):
    """Fire-and-forget signal asking the backend to apply pending changes.

    Implementations:
        - SocketDaemonNotifier: line protocol over TCP
        - NullDaemonNotifier: no backend (development, tests)
    """

    def notify(self) -> bool:
        """Ask the backend to process pending changes.

        Returns:
            bool: True if the request was delivered (or already delivered by
                this notifier), False otherwise. Never raises.
        """
        ...
