"""Authentication result value object.

An AuthResult is immutable. Listeners that change the outcome of an attempt
return a replacement through a SetResult decision; nothing mutates the
result held by the AuthEvent.

Invariant:
    A SUCCESS result always carries an identity. Construction fails
    otherwise, so ``result.identity`` can be used without a None check once
    ``result.is_valid`` holds.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from hostpanel.domain.entities.identity import Identity
from hostpanel.domain.enums import AuthResultCode


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthResult:
    """Outcome of an authentication attempt.

    Attributes:
        code: Outcome code.
        identity: Resolved principal. Present on SUCCESS, and kept on policy
            denials (suspended, expired, maintenance) for audit logging.
        messages: User-facing messages, in display order.

    Example:
        >>> AuthResult.failure(
        ...     AuthResultCode.FAILURE_CREDENTIAL_INVALID, "Invalid credentials."
        ... ).is_valid
        False
    """

    code: AuthResultCode
    identity: Identity | None = None
    messages: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.code is AuthResultCode.SUCCESS and self.identity is None:
            raise ValueError("A successful authentication result requires an identity")
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages))

    @property
    def is_valid(self) -> bool:
        """Whether the attempt succeeded."""
        return self.code is AuthResultCode.SUCCESS

    @classmethod
    def success(cls, identity: Identity, messages: Iterable[str] = ()) -> "AuthResult":
        """Build a SUCCESS result for ``identity``."""
        return cls(code=AuthResultCode.SUCCESS, identity=identity, messages=tuple(messages))

    @classmethod
    def failure(
        cls,
        code: AuthResultCode,
        *messages: str,
        identity: Identity | None = None,
    ) -> "AuthResult":
        """Build a denial.

        Args:
            code: Any code but SUCCESS.
            *messages: User-facing messages.
            identity: Principal resolved before the denial, if any.

        Raises:
            ValueError: If ``code`` is SUCCESS.
        """
        if code is AuthResultCode.SUCCESS:
            raise ValueError("Use AuthResult.success() for successful results")
        return cls(code=code, identity=identity, messages=messages)
