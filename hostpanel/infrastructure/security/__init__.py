"""Security adapters."""

from hostpanel.infrastructure.security.password_service import (
    PasswordService,
    identify_hash,
)

__all__ = ["PasswordService", "identify_hash"]
