"""Domain entities."""

from hostpanel.domain.entities.account_status import AccountStatus
from hostpanel.domain.entities.identity import (
    Identity,
    SuIdentity,
    identity_from_dict,
    normalize_username,
)
from hostpanel.domain.entities.login_attempt import LoginAttempt

__all__ = [
    "AccountStatus",
    "Identity",
    "LoginAttempt",
    "SuIdentity",
    "identity_from_dict",
    "normalize_username",
]
