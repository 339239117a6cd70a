"""Authentication pipeline.

Usage:
    from hostpanel.application.auth import AuthenticationService, Credentials

    result = auth_service.sign_in(
        Credentials(username="bob", password="secret", client_ip="203.0.113.7")
    )
    if not result.is_valid:
        show_errors(result.messages)
"""

from hostpanel.application.auth.auth_event import AuthEvent, Credentials, PostSuccessAction
from hostpanel.application.auth.auth_result import AuthResult
from hostpanel.application.auth.authentication_service import (
    AuthenticationService,
    is_admin_backed,
)
from hostpanel.application.auth.decisions import (
    NO_OPINION,
    AuthListener,
    Decision,
    NoOpinion,
    SetResult,
    StopPropagation,
)
from hostpanel.application.auth.listener_registry import (
    DispatchOutcome,
    ListenerRegistry,
    RegistrationHandle,
)

__all__ = [
    "NO_OPINION",
    "AuthEvent",
    "AuthListener",
    "AuthResult",
    "AuthenticationService",
    "Credentials",
    "Decision",
    "DispatchOutcome",
    "ListenerRegistry",
    "NoOpinion",
    "PostSuccessAction",
    "RegistrationHandle",
    "SetResult",
    "StopPropagation",
    "is_admin_backed",
]
