"""Event bus protocol (port) for domain events.

The domain defines the interface; infrastructure provides adapters.

Implementations:
    - InMemoryEventBus: hostpanel/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(UserSignInFailed, handle_sign_in_failed)
    >>> event_bus.publish(UserSignInFailed(username="bob", reason="..."))
"""

from collections.abc import Callable
from typing import Any, Protocol

from hostpanel.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[Any], None]
"""Type alias for event handler callables.

Event handlers must:
    - Accept a single event parameter (DomainEvent or a specific subclass)
    - Return None (side-effects only)
    - Not rely on other handlers having run (fail-open bus)
"""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and never reaches the publisher.
        2. **Synchronous**: Handlers run in the publisher's thread, in
           subscription order, before publish() returns.
        3. **Type-based routing**: Handlers registered for an event type only
           receive events of that exact type.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (e.g., UserSignInFailed).
            handler: Callable invoked with the published event.
        """
        ...

    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Remove a previously subscribed handler.

        Unknown handlers are ignored.

        Args:
            event_type: Event class the handler was subscribed to.
            handler: Handler to remove.
        """
        ...

    def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish. Every handler registered for
                type(event) is called with this instance.

        Notes:
            - No handlers = no-op (not an error)
            - NEVER raises handler exceptions (fail-open guarantee)
        """
        ...
