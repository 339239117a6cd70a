"""Event bus dependency factories.

The application-scoped bus carries sign-in outcome events to the logging
handler. Sign-in requests use their own bus (new_event_bus) because the
password recovery listener subscribes one-shot handlers that must not leak
into other requests.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hostpanel.domain.protocols.event_bus_protocol import EventBusProtocol


def new_event_bus() -> "EventBusProtocol":
    """Create an event bus with the logging handler subscribed.

    Returns:
        InMemoryEventBus implementing EventBusProtocol.
    """
    from hostpanel.core.container.infrastructure import get_logger
    from hostpanel.infrastructure.events import InMemoryEventBus
    from hostpanel.infrastructure.events.handlers import LoggingEventHandler

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)
    LoggingEventHandler(logger=logger).subscribe_to(event_bus)
    return event_bus


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns:
        Event bus implementing EventBusProtocol.
    """
    return new_event_bus()
