"""Structured logging port.

Every component of the sign-in pipeline logs through this protocol: a
snake_case event name plus keyword context, never formatted strings.

Levels used by the pipeline:
    DEBUG     listener registration, skipped rehash, daemon round trips
    INFO      identity stored, hash upgraded, account policy refusals
    WARNING   blocked or throttled clients, failing event handlers
    ERROR     missing customer account, unreachable backend daemon
    CRITICAL  reserved for failures that take the panel down

Passwords and hashes must not be passed as context. Usernames and client
IP addresses may be.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Port implemented by logging adapters (see ConsoleAdapter)."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error.

        Args:
            message: Event name.
            error: Exception that caused the error, if any. Adapters add its
                type name and text to the context.
            **context: Key-value context.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure that needs an operator now (same arguments as error)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger adding ``context`` to every entry.

        The receiver is left unchanged.
        """
        ...
