"""Configuration database model (runtime panel settings)."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hostpanel.infrastructure.persistence.base import BaseModel


class ConfigModel(BaseModel):
    """Name/value configuration row.

    Fields:
        name: Upper-case configuration key (e.g. MAINTENANCE_MODE)
        value: Raw value, coerced to the Settings field type when read
    """

    __tablename__ = "config"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        comment="Configuration key",
    )
    value: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Raw configuration value",
    )
