"""PageMessageProtocol (port) for messages shown on the next rendered page."""

from typing import Protocol


class PageMessageProtocol(Protocol):
    """Queue of user-facing page messages (flash messages)."""

    def add(self, message: str, level: str = "info") -> None:
        """Queue ``message`` for display.

        Args:
            message: Message text (may contain markup).
            level: Message level (info, success, warning, error,
                static_error).
        """
        ...
