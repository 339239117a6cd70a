"""Core errors package.

Usage:
    from hostpanel.core.errors import DomainError, NotFoundError
"""

from hostpanel.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
)
from hostpanel.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "NotFoundError",
    "AuthenticationError",
    "AuthorizationError",
]
