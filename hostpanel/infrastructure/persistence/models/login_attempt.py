"""Login attempt database model (brute-force detection)."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hostpanel.infrastructure.persistence.base import BaseModel


class LoginAttemptModel(BaseModel):
    """Sign-in attempt counter of one client IP address.

    Fields:
        ip_address: Client IP address (unique)
        session_id: Session of the latest attempt
        login_count: Attempts since the record was created
        last_access: Unix timestamp of the latest attempt
    """

    __tablename__ = "login_attempts"

    ip_address: Mapped[str] = mapped_column(
        String(45),
        unique=True,
        index=True,
        nullable=False,
        comment="Client IPv4 or IPv6 address",
    )
    session_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Session of the latest attempt",
    )
    login_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        comment="Attempts since the record was created",
    )
    last_access: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        comment="Unix timestamp of the latest attempt",
    )
