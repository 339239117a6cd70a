"""Customer account database model.

One row per ordinary user, holding the hosting account state managed by the
reseller.
"""

from sqlalchemy import Boolean, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from hostpanel.infrastructure.persistence.base import BaseModel


class CustomerAccountModel(BaseModel):
    """Hosting account of a customer.

    Fields:
        user_id: Owning panel account (unique)
        enabled: False while suspended by the reseller
        expires_at: Expiry as unix timestamp, 0 for never
    """

    __tablename__ = "customer_accounts"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        comment="Owning panel account",
    )
    enabled: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="False while the account is suspended",
    )
    expires_at: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Expiry unix timestamp, 0 for never",
    )
