"""Listener decisions and the listener contract.

Every listener returns exactly one decision:

    NoOpinion        leave the current result untouched
    SetResult        replace the current result (last writer wins), optionally
                     with a deferred post-success action
    StopPropagation  end the current phase; the message is reported by the
                     dispatcher as the stop value

Usage:
    class RejectEveryone:
        def handle(self, event: AuthEvent) -> Decision:
            return StopPropagation(message="Sign-in is closed.")

    registry.register(AuthPhase.BEFORE, RejectEveryone(), priority=10)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeAlias

from hostpanel.application.auth.auth_event import AuthEvent, PostSuccessAction
from hostpanel.application.auth.auth_result import AuthResult


@dataclass(frozen=True, slots=True)
class NoOpinion:
    """Listener does not change the outcome."""


@dataclass(frozen=True, slots=True, kw_only=True)
class SetResult:
    """Listener replaces the current result.

    Attributes:
        result: Replacement result.
        post_success: Deferred action, run only if the final result of the
            attempt is valid.
    """

    result: AuthResult
    post_success: PostSuccessAction | None = None


@dataclass(frozen=True, slots=True)
class StopPropagation:
    """Listener ends the current phase.

    Attributes:
        message: Stop value reported to the service.
    """

    message: str = ""


Decision: TypeAlias = NoOpinion | SetResult | StopPropagation

NO_OPINION = NoOpinion()


class AuthListener(Protocol):
    """Single-method listener contract."""

    def handle(self, event: AuthEvent) -> Decision:
        """React to a phase of an authentication attempt."""
        ...


ListenerHandler = AuthListener | Callable[[AuthEvent], Decision]
