"""Refusal reasons returned inside Failure.

A DomainError is data, not an exception: guards build one, wrap it in a
Failure and return it. ``message`` is shown to the panel user as is, so it
comes from AuthMessage; ``code`` is what callers and tests branch on.

Example:
    Failure(error=AuthenticationError(
        code=ErrorCode.NOT_AUTHENTICATED,
        message=AuthMessage.NOT_AUTHENTICATED,
    ))
"""

from dataclasses import dataclass

from hostpanel.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Reason a guard refused a request.

    Attributes:
        code: Stable machine-readable reason.
        message: User-facing text.
        details: Extra values for logs (never shown to the user).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
