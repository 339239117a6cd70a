"""Domain events."""

from hostpanel.domain.events.auth_events import (
    PasswordHashUpgraded,
    SignInPageRendered,
    UserSignInFailed,
    UserSignInSucceeded,
)
from hostpanel.domain.events.base_event import DomainEvent

__all__ = [
    "DomainEvent",
    "PasswordHashUpgraded",
    "SignInPageRendered",
    "UserSignInFailed",
    "UserSignInSucceeded",
]
