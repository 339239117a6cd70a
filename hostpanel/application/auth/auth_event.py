"""Per-attempt authentication context.

A fresh AuthEvent is built for every attempt. It is immutable: the registry
derives a new value for each phase and after each SetResult decision, so a
listener always sees the most recent result set by an earlier listener of the
same attempt.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from hostpanel.application.auth.auth_result import AuthResult
from hostpanel.domain.enums import AuthPhase

if TYPE_CHECKING:
    from hostpanel.application.auth.authentication_service import (
        AuthenticationService,
    )

PostSuccessAction = Callable[[AuthResult], None]
"""Deferred side effect, run by the service only when the final result is valid.

Receives the final result. Used for writes that must not happen when an
after-authentication gate denies the sign-in (password hash upgrade).
"""


@dataclass(frozen=True, slots=True, kw_only=True)
class Credentials:
    """Submitted sign-in data, already sanitized by the request handler.

    Attributes:
        username: Submitted username (normalized by the credential check).
        password: Submitted plaintext password.
        client_ip: Client IP address, used by brute-force detection.
        session_id: Browser session identifier.
    """

    username: str
    password: str = field(repr=False)
    client_ip: str | None = None
    session_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthEvent:
    """Context threaded through every listener of one attempt.

    Attributes:
        phase: Phase currently dispatched.
        target: Service running the attempt (for listener introspection).
        credentials: Submitted sign-in data.
        result: Latest result, None until a listener sets one.
        post_success_actions: Deferred actions collected from SetResult
            decisions, in collection order.
    """

    phase: AuthPhase
    target: "AuthenticationService" = field(repr=False, compare=False)
    credentials: Credentials
    result: AuthResult | None = None
    post_success_actions: tuple[PostSuccessAction, ...] = ()

    @property
    def has_result(self) -> bool:
        return self.result is not None

    def with_phase(self, phase: AuthPhase) -> "AuthEvent":
        """Return the context for ``phase``."""
        return replace(self, phase=phase)

    def with_result(
        self,
        result: AuthResult,
        post_success: PostSuccessAction | None = None,
    ) -> "AuthEvent":
        """Return the context with ``result`` as the latest result.

        Args:
            result: Replacement result (last writer wins).
            post_success: Optional deferred action to collect.
        """
        actions = self.post_success_actions
        if post_success is not None:
            actions = (*actions, post_success)
        return replace(self, result=result, post_success_actions=actions)
