"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based registry. Handlers run
synchronously in the publisher's thread, in subscription order.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type -> list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Handler list snapshot per publish (handlers may unsubscribe themselves)

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(UserSignInFailed, logging_handler.handle_user_sign_in_failed)
    >>> bus.publish(UserSignInFailed(username="bob", reason="failure_credential_invalid"))
"""

import threading
from collections import defaultdict

from hostpanel.domain.events.base_event import DomainEvent
from hostpanel.domain.protocols.event_bus_protocol import EventHandler
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """Synchronous, fail-open event bus living for one request.

    A failing handler is logged at WARNING and the remaining handlers still
    run. publish() works on a copy of the handler list, so a handler may
    unsubscribe itself (PasswordRecovery does) while being called.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger
        self._lock = threading.Lock()

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches
                (no inheritance matching).
            handler: Callable invoked with the event.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        with self._lock:
            self._handlers[event_type].append(handler)

    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Remove the first registration of ``handler`` for ``event_type``.

        Unknown handlers are ignored.
        """
        with self._lock:
            handlers = self._handlers.get(event_type)
            if handlers and handler in handlers:
                handlers.remove(handler)

    def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish. All handlers registered for
                type(event) are called.

        Flow:
            1. Snapshot handlers for type(event)
            2. If no handlers, return immediately (no-op)
            3. Call each handler; log any exception (warning level)
            4. Return (never raise handler exceptions)
        """
        event_type = type(event)
        with self._lock:
            handlers = list(self._handlers.get(event_type, ()))

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception as exc:
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handler, "__name__", type(handler).__name__),
                    error_type=type(exc).__name__,
                    error_message=str(exc),
                )
