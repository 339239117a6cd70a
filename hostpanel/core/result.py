"""Success/Failure values returned by the identity guards.

Sign-in itself reports through AuthResult. The checks that run on every
protected page (check_authentication) and user switching (switch_user)
refuse by returning a Failure carrying a DomainError, so request handlers
branch with ``match`` instead of try/except:

    match auth_service.check_authentication("reseller"):
        case Success(value=identity):
            ...
        case Failure(error=error):
            flash(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Guard passed; ``value`` is the identity (or other payload)."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Guard refused; ``error`` says why."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
