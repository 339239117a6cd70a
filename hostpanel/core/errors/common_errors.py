"""DomainError subclasses returned by the identity guards.

- AuthenticationError: no usable identity (signed out, maintenance mode)
- AuthorizationError: identity present but refused (wrong area, foreign
  referer, switch-user rules)
- NotFoundError: switch-user target does not exist
"""

from dataclasses import dataclass

from hostpanel.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Referenced record is missing.

    Attributes:
        resource_type: Kind of record, e.g. "user".
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """The request carries no identity the guard can accept."""


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """The identity may not do what was asked."""
