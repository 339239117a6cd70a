"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Settings and the dependency container

The core module has NO dependencies on other application layers, except the
container, which is the composition root.
"""

from hostpanel.core.enums import ErrorCode
from hostpanel.core.errors import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
)
from hostpanel.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
]
