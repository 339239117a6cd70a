"""User database model (panel accounts).

Administrators, resellers and customers share this table; ``user_type``
tells them apart and ``created_by`` links each account to its owner.

Security:
    - password_hash: NEVER stores plaintext passwords. Older rows may hold
      legacy MD5-based hashes until their owner signs in again.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hostpanel.infrastructure.persistence.base import BaseModel


class UserModel(BaseModel):
    """Panel account.

    Fields:
        id: Account identifier (from BaseModel)
        username: Unique login name (IDNA-encoded, lower case)
        password_hash: bcrypt or legacy hash
        user_type: admin, reseller or user
        email: Contact address
        created_by: Owning account (0 for administrators)
        status: Backend processing status ("ok", "tochangepwd", ...)
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Login name, IDNA-encoded and lower case",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt or legacy (MD5-based) password hash",
    )
    user_type: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        comment="Account type: admin, reseller, user",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        comment="Contact email address",
    )
    created_by: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Owning account ID (0 for administrators)",
    )
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="ok",
        comment="Backend processing status",
    )
