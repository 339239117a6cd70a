"""SQLAlchemy persistence: engine/session management, models, repositories."""

from hostpanel.infrastructure.persistence.base import Base, BaseModel
from hostpanel.infrastructure.persistence.database import Database

__all__ = ["Base", "BaseModel", "Database"]
