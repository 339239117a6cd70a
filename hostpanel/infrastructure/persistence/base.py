"""Declarative base of the panel tables.

Every table has an integer ``id`` (account ids appear in the panel and in
``users.created_by``) and server-side ``created_at``/``updated_at``
timestamps. Repositories map rows to domain entities; nothing outside
infrastructure/persistence imports these classes.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Holds the metadata of all models."""


class BaseModel(Base):
    """Abstract parent of all tables: id plus row timestamps."""

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"
