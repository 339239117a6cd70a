"""Repository implementations (adapters for the domain store protocols)."""

from hostpanel.infrastructure.persistence.repositories.account_status_repository import (
    SqlAccountStatusStore,
)
from hostpanel.infrastructure.persistence.repositories.credential_repository import (
    SqlCredentialStore,
)
from hostpanel.infrastructure.persistence.repositories.login_attempt_repository import (
    SqlLoginAttemptStore,
)

__all__ = [
    "SqlAccountStatusStore",
    "SqlCredentialStore",
    "SqlLoginAttemptStore",
]
