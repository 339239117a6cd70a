"""Common fields of sign-in domain events.

Events are published on the request event bus after something happened
(past tense names: UserSignInFailed, PasswordHashUpgraded). Subclasses add
their own fields and must stay frozen keyword-only dataclasses, so the
defaults below never clash with required subclass fields.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base of all domain events.

    Attributes:
        event_id: Correlates log lines written by different handlers.
        occurred_at: Creation time (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utc_now)
