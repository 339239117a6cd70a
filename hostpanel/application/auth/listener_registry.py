"""Priority-ordered listener registry and dispatcher.

Listeners register per phase with an integer priority. Dispatch runs them in
descending priority, ties broken by registration order, and stops at the
first StopPropagation.

Concurrency:
    Registration and removal happen under a lock. Dispatch takes a snapshot
    of the phase's listeners under the same lock and iterates the copy, so a
    registration racing with a running attempt never affects that attempt.
    The registry holds no AuthEvent state; independent attempts can be
    dispatched from several threads.

Errors:
    Exceptions raised by a listener propagate to the caller of dispatch().
    A listener that wants to record a failure returns a SetResult.

Usage:
    >>> registry = ListenerRegistry()
    >>> handle = registry.register(AuthPhase.DURING, check_credentials, priority=99)
    >>> outcome = registry.dispatch(AuthPhase.DURING, event)
    >>> outcome.event.result
    AuthResult(code=<AuthResultCode.SUCCESS: 'success'>, ...)
    >>> registry.unregister(handle)
"""

import itertools
import threading
from collections import defaultdict
from dataclasses import dataclass

from hostpanel.application.auth.auth_event import AuthEvent
from hostpanel.application.auth.decisions import (
    Decision,
    ListenerHandler,
    NoOpinion,
    SetResult,
    StopPropagation,
)
from hostpanel.domain.enums import AuthPhase
from hostpanel.domain.protocols.logger_protocol import LoggerProtocol


@dataclass(frozen=True, slots=True)
class RegistrationHandle:
    """Opaque handle returned by register(), used to unregister.

    Attributes:
        phase: Phase the listener fires on.
        priority: Higher runs first.
        sequence: Registration order, breaks priority ties.
    """

    phase: AuthPhase
    priority: int
    sequence: int


@dataclass(frozen=True, slots=True)
class _Registration:
    handle: RegistrationHandle
    handler: ListenerHandler

    @property
    def sort_key(self) -> tuple[int, int]:
        return (-self.handle.priority, self.handle.sequence)


@dataclass(frozen=True, slots=True, kw_only=True)
class DispatchOutcome:
    """Result of dispatching one phase.

    Attributes:
        event: Context after the last listener that ran.
        stopped: Whether a listener stopped propagation.
        stop_value: Message supplied by the stopping listener.
    """

    event: AuthEvent
    stopped: bool = False
    stop_value: str | None = None


def _listener_name(handler: ListenerHandler) -> str:
    name = getattr(handler, "__name__", None)
    return name if name is not None else type(handler).__name__


class ListenerRegistry:
    """Ordered listener registration and synchronous fan-out per phase.

    Attributes:
        _registrations: Phase to listeners, kept sorted by priority then
            sequence.
        _sequence: Monotonic registration counter.
        _lock: Guards _registrations and _sequence.
        _logger: Optional logger for registration and stop diagnostics.
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        self._registrations: dict[AuthPhase, list[_Registration]] = defaultdict(list)
        self._sequence = itertools.count()
        self._lock = threading.Lock()
        self._logger = logger

    def register(
        self,
        phase: AuthPhase,
        handler: ListenerHandler,
        priority: int = 0,
    ) -> RegistrationHandle:
        """Register ``handler`` for ``phase``.

        Args:
            phase: Phase the handler fires on.
            handler: Object with a ``handle(event)`` method, or a callable
                taking the event. Must return a Decision.
            priority: Higher runs first; equal priorities run in
                registration order.

        Returns:
            RegistrationHandle: Handle for unregister().

        Raises:
            TypeError: If ``handler`` is neither a listener nor a callable.
        """
        if not callable(getattr(handler, "handle", None)) and not callable(handler):
            raise TypeError(f"Listener must be callable or define handle(): {handler!r}")

        with self._lock:
            handle = RegistrationHandle(phase, priority, next(self._sequence))
            registrations = self._registrations[phase]
            registrations.append(_Registration(handle, handler))
            registrations.sort(key=lambda registration: registration.sort_key)

        if self._logger is not None:
            self._logger.debug(
                "auth_listener_registered",
                phase=phase.value,
                priority=priority,
                listener=_listener_name(handler),
            )
        return handle

    def unregister(self, handle: RegistrationHandle) -> None:
        """Remove the listener registered under ``handle``.

        Raises:
            KeyError: If the handle is unknown or already removed.
        """
        with self._lock:
            registrations = self._registrations.get(handle.phase, [])
            for index, registration in enumerate(registrations):
                if registration.handle == handle:
                    del registrations[index]
                    return
        raise KeyError(f"Unknown listener registration: {handle!r}")

    def listeners(self, phase: AuthPhase) -> tuple[ListenerHandler, ...]:
        """Return the handlers of ``phase`` in dispatch order."""
        return tuple(registration.handler for registration in self._snapshot(phase))

    def dispatch(self, phase: AuthPhase, event: AuthEvent) -> DispatchOutcome:
        """Run the listeners of ``phase`` against ``event``.

        Args:
            phase: Phase to dispatch. Stamped on the event.
            event: Context from the previous phase.

        Returns:
            DispatchOutcome: Context after the last listener that ran, and
                the stop state.

        Raises:
            TypeError: If a listener returns something other than a Decision.
            Exception: Whatever a listener raises.
        """
        current = event.with_phase(phase)

        for registration in self._snapshot(phase):
            decision = self._invoke(registration.handler, current)

            match decision:
                case NoOpinion():
                    continue
                case SetResult(result=result, post_success=post_success):
                    current = current.with_result(result, post_success)
                case StopPropagation(message=message):
                    if self._logger is not None:
                        self._logger.debug(
                            "auth_propagation_stopped",
                            phase=phase.value,
                            listener=_listener_name(registration.handler),
                        )
                    return DispatchOutcome(event=current, stopped=True, stop_value=message)
                case _:
                    raise TypeError(
                        f"Listener {_listener_name(registration.handler)} returned "
                        f"{type(decision).__name__}, expected a Decision"
                    )

        return DispatchOutcome(event=current)

    def _snapshot(self, phase: AuthPhase) -> tuple[_Registration, ...]:
        with self._lock:
            return tuple(self._registrations.get(phase, ()))

    @staticmethod
    def _invoke(handler: ListenerHandler, event: AuthEvent) -> Decision:
        handle = getattr(handler, "handle", None)
        if callable(handle):
            return handle(event)
        return handler(event)  # type: ignore[operator]
