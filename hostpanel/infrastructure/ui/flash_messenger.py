"""Flash messages queued for the next rendered page."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class PageMessage:
    """One queued page message.

    Attributes:
        message: Text (may contain markup, rendered as-is).
        level: Display level (info, success, warning, error, static_error).
    """

    message: str
    level: str = "info"


class FlashMessenger:
    """PageMessageProtocol implementation holding messages until rendered.

    Duplicate messages with the same level are queued once.

    Example:
        >>> messenger = FlashMessenger()
        >>> messenger.add("Password lost?", level="static_error")
        >>> [m.level for m in messenger.pop_all()]
        ['static_error']
    """

    def __init__(self) -> None:
        self._messages: list[PageMessage] = []

    def add(self, message: str, level: str = "info") -> None:
        """Queue a message for display."""
        entry = PageMessage(message=message, level=level)
        if entry not in self._messages:
            self._messages.append(entry)

    def peek(self) -> tuple[PageMessage, ...]:
        """Queued messages, without removing them."""
        return tuple(self._messages)

    def pop_all(self) -> list[PageMessage]:
        """Remove and return every queued message in insertion order."""
        messages, self._messages = self._messages, []
        return messages

    def __len__(self) -> int:
        return len(self._messages)
